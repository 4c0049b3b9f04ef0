class CodingHubError(Exception):
    """Base exception for all coding_hub errors"""
    pass

class ConfigError(CodingHubError):
    """Invalid or inconsistent global.json"""
    pass

class CatalogError(CodingHubError):
    """
    A catalog violates one of its invariants at construction time
    (duplicate language names, wrong entry type, etc)
    """
    pass

class UnreachableStateError(CodingHubError):
    """
    A value outside a closed set (difficulty, page) reached the core.
    The UI only offers values from the closed sets, so this is a defect, not user error.
    """
    pass
