class PublishConfigurationError(ValueError):
    """Raised for operator mistakes that must abort the whole run.

    Covers a malformed credential artifact and a storage bucket that cannot be
    initialised or reached.
    """
