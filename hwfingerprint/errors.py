class FingerprintError(Exception):
    pass


class CollectionFailure(FingerprintError):
    """
    Raised when the host inventory could not be collected.

    The underlying query error is kept as ``__cause__``. Once raised for a
    fingerprinter it is raised again for every later request, the collection
    is never retried.
    """


class UnsupportedPlatform(FingerprintError):
    '''the host collector cannot query the running platform'''
