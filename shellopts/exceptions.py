class UsageError(ValueError):
    pass


class RegistryConsistencyError(RuntimeError):
    pass


class ReadOnlyVariableError(AttributeError):
    pass


class ManifestError(ValueError):
    pass


class ExtensionError(RuntimeError):
    pass
