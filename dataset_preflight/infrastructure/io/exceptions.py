class PreflightInfrastructureError(Exception):
    pass


class DataSourceError(PreflightInfrastructureError):
    pass


class DataSourceNotFoundError(DataSourceError):
    pass


class DataParseError(DataSourceError):
    pass


class DatasetScanError(PreflightInfrastructureError):
    pass


class DatasetNotFoundError(DatasetScanError):
    pass


class DatasetNotDirectoryError(DatasetScanError):
    pass


class DocumentWriteError(PreflightInfrastructureError):
    pass
