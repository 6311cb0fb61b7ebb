class CompanyBrowserError(Exception):
    """Base exception for all company_browser errors"""
    pass

class ConfigError(CompanyBrowserError):
    """Invalid or inconsistent global.json"""
    pass

class DatasetLoadError(CompanyBrowserError):
    """
    The data source could not supply a dataset
    missing file, invalid JSON, wrong top-level shape
    """
    pass
