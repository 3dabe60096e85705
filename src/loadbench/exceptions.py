"""Exception hierarchy for the block loader.

The class a failure is raised as fixes its blast radius:

- ``IoError`` / ``ParseError`` abort the whole run.
- ``DecodeError`` subclasses (``SchemaError``, ``EncodingError``) abort the
  enclosing record. The block decoder skips the offending transaction.
"""


class LoaderError(Exception):
    """Base class for every error raised by loadbench."""


class IoError(LoaderError):
    """A block directory could not be listed or a block file could not be read."""


class ParseError(LoaderError):
    """A block file is not syntactically valid JSON."""


class DecodeError(LoaderError):
    """A record could not be decoded into the domain model."""


class SchemaError(DecodeError):
    """An expected field is absent or has the wrong shape."""


class EncodingError(DecodeError):
    """A present value fails its expected encoding (base58, base64, u8 range)."""


class LayoutError(SchemaError):
    """Header counts, signatures and indices disagree with the account-key list."""
