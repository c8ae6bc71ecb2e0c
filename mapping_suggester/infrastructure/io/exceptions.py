class MappingSuggesterInfrastructureError(Exception):
    pass


class DataSourceError(MappingSuggesterInfrastructureError):
    pass


class DataSourceNotFoundError(DataSourceError):
    pass


class DataParseError(DataSourceError):
    pass


class TargetShapeLoadError(DataParseError):
    pass
