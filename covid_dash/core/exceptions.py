class CovidDashError(Exception):
    """Base exception for all covid_dash errors"""
    pass

class ConfigError(CovidDashError):
    """Missing or inconsistent global.json"""
    pass

class DatasetLoadError(CovidDashError):
    """
    The data file could not be read or parsed
    (missing file, permission error, malformed CSV)
    """
    pass

class DatasetSchemaError(CovidDashError):
    """
    The data file was read but lacks the columns the dashboard needs
    (age group / race-ethnicity)
    """
    pass
