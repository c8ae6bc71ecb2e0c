"""Field-specific token builders.

Each builder owns a fixed vocabulary of synonyms and abbreviations for one
category of field (email, phone, names, identifiers, dates, numbers, addresses
and URLs). A builder applies when the context's declared type is one it
supports, or when the field name or id mentions one of its trigger keywords.

Builders with sub-cases (names, identifiers, dates, numbers, addresses) check
each sub-case independently and union every vocabulary that applies, so a
field called ``created_birth_date`` picks up both creation and birth tokens.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ....constants import BuilderPriority
from ...entities.naming import TokenMetadata, TokenResult
from ...entities.target_field import FieldType
from .base import supports_type
from .case_utils import contains_keywords, generate_case_variations

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ...entities.naming import NamingContext


def _mentions(context: NamingContext, keywords: Iterable[str]) -> bool:
    keywords = tuple(keywords)
    return contains_keywords(context.field_name, keywords) or contains_keywords(
        context.field_id, keywords
    )


def _add_bundle(result: TokenResult, bundle: Iterable[str]) -> list[str]:
    added = list(bundle)
    for token in added:
        result.add(token)
        result.update(generate_case_variations(token))
    return added


class EmailTokenBuilder:
    priority: int = BuilderPriority.EMAIL
    supported_types: frozenset[FieldType] = frozenset({FieldType.EMAIL})

    TRIGGERS = ("email", "mail")
    VOCABULARY = ("email", "mail", "e_mail", "email_address", "emailaddress")

    def can_handle(self, context: NamingContext) -> bool:
        return supports_type(self, context) or _mentions(context, self.TRIGGERS)

    def generate_tokens(self, context: NamingContext) -> TokenResult:
        result = TokenResult()
        primary = _add_bundle(result, self.VOCABULARY)
        result.metadata = TokenMetadata(
            primary_tokens=primary,
            abbreviations=["mail"],
            synonyms=["e_mail", "electronic_mail"],
        )
        return result


class PhoneTokenBuilder:
    priority: int = BuilderPriority.PHONE
    supported_types: frozenset[FieldType] = frozenset({FieldType.PHONE})

    TRIGGERS = ("phone", "tel", "mobile", "cell")
    VOCABULARY = (
        "phone",
        "tel",
        "telephone",
        "mobile",
        "cell",
        "phone_number",
        "phonenumber",
    )

    def can_handle(self, context: NamingContext) -> bool:
        return supports_type(self, context) or _mentions(context, self.TRIGGERS)

    def generate_tokens(self, context: NamingContext) -> TokenResult:
        result = TokenResult()
        primary = _add_bundle(result, self.VOCABULARY)
        result.metadata = TokenMetadata(
            primary_tokens=primary,
            abbreviations=["tel", "mob"],
            synonyms=["telephone", "mobile", "cell", "cellular"],
        )
        return result


class UrlTokenBuilder:
    priority: int = BuilderPriority.URL
    supported_types: frozenset[FieldType] = frozenset({FieldType.URL})

    TRIGGERS = ("url", "link", "website", "site")
    VOCABULARY = (
        "url",
        "link",
        "website",
        "site",
        "web_address",
        "webaddress",
        "homepage",
    )

    def can_handle(self, context: NamingContext) -> bool:
        return supports_type(self, context) or _mentions(context, self.TRIGGERS)

    def generate_tokens(self, context: NamingContext) -> TokenResult:
        result = TokenResult()
        primary = _add_bundle(result, self.VOCABULARY)
        result.metadata = TokenMetadata(
            primary_tokens=primary,
            abbreviations=["url", "link"],
            synonyms=["website", "web_address", "homepage"],
        )
        return result


class IdTokenBuilder:
    """Identifier tokens, with user and customer specializations.

    Applies on the ``id`` keyword only; the declared types document intent
    but a plain string field is not treated as an identifier.
    """

    priority: int = BuilderPriority.ID
    supported_types: frozenset[FieldType] = frozenset(
        {FieldType.STRING, FieldType.INTEGER}
    )

    TRIGGERS = ("id",)
    VOCABULARY = ("id", "identifier", "key", "primary_key", "pk")
    USER_VOCABULARY = ("user_id", "userid", "uid", "user_key")
    CUSTOMER_VOCABULARY = (
        "customer_id",
        "customerid",
        "cust_id",
        "custid",
        "customer_key",
    )

    def can_handle(self, context: NamingContext) -> bool:
        return _mentions(context, self.TRIGGERS)

    def generate_tokens(self, context: NamingContext) -> TokenResult:
        result = TokenResult()
        primary = _add_bundle(result, self.VOCABULARY)
        if _mentions(context, ("user",)):
            _add_bundle(result, self.USER_VOCABULARY)
        # "cust" also covers "customer"
        if _mentions(context, ("cust",)):
            _add_bundle(result, self.CUSTOMER_VOCABULARY)
        result.metadata = TokenMetadata(
            primary_tokens=primary,
            abbreviations=["id", "pk", "uid"],
            synonyms=["identifier", "key", "primary_key"],
        )
        return result


class NameTokenBuilder:
    priority: int = BuilderPriority.NAME
    supported_types: frozenset[FieldType] = frozenset({FieldType.STRING})

    TRIGGERS = ("name",)
    FIRST_VOCABULARY = (
        "firstname",
        "first_name",
        "fname",
        "first",
        "given_name",
        "givenname",
    )
    LAST_VOCABULARY = (
        "lastname",
        "last_name",
        "lname",
        "last",
        "surname",
        "family_name",
        "familyname",
    )
    FULL_VOCABULARY = (
        "fullname",
        "full_name",
        "display_name",
        "displayname",
        "complete_name",
    )

    def can_handle(self, context: NamingContext) -> bool:
        return _mentions(context, self.TRIGGERS)

    def generate_tokens(self, context: NamingContext) -> TokenResult:
        result = TokenResult()
        result.add("name")
        primary = ["name"]
        abbreviations: list[str] = []

        if _mentions(context, ("first",)):
            primary.extend(_add_bundle(result, self.FIRST_VOCABULARY))
            abbreviations.append("fname")
        if _mentions(context, ("last", "sur")):
            primary.extend(_add_bundle(result, self.LAST_VOCABULARY))
            abbreviations.append("lname")
        if _mentions(context, ("full",)):
            primary.extend(_add_bundle(result, self.FULL_VOCABULARY))

        result.metadata = TokenMetadata(
            primary_tokens=primary,
            abbreviations=abbreviations,
            synonyms=["given_name", "family_name", "surname"],
        )
        return result


class DateTimeTokenBuilder:
    priority: int = BuilderPriority.DATETIME
    supported_types: frozenset[FieldType] = frozenset(
        {FieldType.DATE, FieldType.DATETIME}
    )

    TRIGGERS = ("date", "time", "created", "updated", "modified")
    VOCABULARY = ("date", "time", "datetime", "timestamp")
    CREATED_VOCABULARY = (
        "created",
        "created_at",
        "createdat",
        "creation_date",
        "creationdate",
    )
    UPDATED_VOCABULARY = (
        "updated",
        "updated_at",
        "updatedat",
        "modified",
        "modified_at",
        "modifiedat",
    )
    BIRTH_VOCABULARY = ("birthdate", "birth_date", "dob", "date_of_birth", "born")

    def can_handle(self, context: NamingContext) -> bool:
        return supports_type(self, context) or _mentions(context, self.TRIGGERS)

    def generate_tokens(self, context: NamingContext) -> TokenResult:
        result = TokenResult()
        primary = _add_bundle(result, self.VOCABULARY)
        if _mentions(context, ("created",)):
            primary.extend(_add_bundle(result, self.CREATED_VOCABULARY))
        if _mentions(context, ("updated", "modified")):
            primary.extend(_add_bundle(result, self.UPDATED_VOCABULARY))
        if _mentions(context, ("birth", "born")):
            primary.extend(_add_bundle(result, self.BIRTH_VOCABULARY))
        result.metadata = TokenMetadata(
            primary_tokens=primary,
            abbreviations=["dob", "ts"],
            synonyms=["timestamp", "datetime"],
        )
        return result


class NumericTokenBuilder:
    """Age, money and count vocabularies.

    A numeric field whose name hits none of the sub-cases contributes no
    tokens of its own and relies on the generic builder.
    """

    priority: int = BuilderPriority.NUMERIC
    supported_types: frozenset[FieldType] = frozenset(
        {
            FieldType.NUMBER,
            FieldType.INTEGER,
            FieldType.DECIMAL,
            FieldType.CURRENCY,
            FieldType.PERCENTAGE,
        }
    )

    TRIGGERS = ("age", "count", "total", "amount", "price", "cost", "salary", "wage")
    AGE_VOCABULARY = ("age", "years", "years_old", "yearsold")
    MONEY_TRIGGERS = ("price", "cost", "salary", "wage", "amount", "money")
    MONEY_VOCABULARY = (
        "price",
        "cost",
        "salary",
        "wage",
        "amount",
        "money",
        "payment",
        "fee",
    )
    COUNT_TRIGGERS = ("count", "total", "number")
    COUNT_VOCABULARY = ("count", "total", "number", "qty", "quantity")

    def can_handle(self, context: NamingContext) -> bool:
        return supports_type(self, context) or _mentions(context, self.TRIGGERS)

    def generate_tokens(self, context: NamingContext) -> TokenResult:
        result = TokenResult()
        primary: list[str] = []
        if _mentions(context, ("age",)):
            primary.extend(_add_bundle(result, self.AGE_VOCABULARY))
        if _mentions(context, self.MONEY_TRIGGERS):
            primary.extend(_add_bundle(result, self.MONEY_VOCABULARY))
        if _mentions(context, self.COUNT_TRIGGERS):
            primary.extend(_add_bundle(result, self.COUNT_VOCABULARY))
        result.metadata = TokenMetadata(
            primary_tokens=primary,
            abbreviations=["qty", "amt", "num"],
            synonyms=["quantity", "amount", "number"],
        )
        return result


class AddressTokenBuilder:
    priority: int = BuilderPriority.ADDRESS
    supported_types: frozenset[FieldType] = frozenset({FieldType.STRING})

    TRIGGERS = ("address", "street", "city", "state", "zip", "postal", "country")
    # (sub-case triggers, vocabulary) pairs, checked independently
    BUNDLES: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
        (("address",), ("address", "addr", "street_address", "streetaddress")),
        (("street",), ("street", "st", "road", "rd", "avenue", "ave")),
        (("city",), ("city", "town", "municipality")),
        (("state", "province"), ("state", "province", "region")),
        (
            ("zip", "postal"),
            ("zip", "zipcode", "zip_code", "postal", "postal_code", "postalcode"),
        ),
        (("country",), ("country", "nation", "country_code", "countrycode")),
    )

    def can_handle(self, context: NamingContext) -> bool:
        return _mentions(context, self.TRIGGERS)

    def generate_tokens(self, context: NamingContext) -> TokenResult:
        result = TokenResult()
        primary: list[str] = []
        for triggers, vocabulary in self.BUNDLES:
            if _mentions(context, triggers):
                primary.extend(_add_bundle(result, vocabulary))
        result.metadata = TokenMetadata(
            primary_tokens=primary,
            abbreviations=["addr", "st", "rd", "ave", "zip"],
            synonyms=[
                "street",
                "road",
                "avenue",
                "town",
                "municipality",
                "province",
                "region",
            ],
        )
        return result
