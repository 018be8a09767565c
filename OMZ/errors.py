class CodecError(ValueError):
    """Base class for every failure of a compress/decompress call."""


class EmptyInputError(CodecError):
    pass


class CodeTooLongError(CodecError):
    pass


class UncompressibleError(CodecError):
    pass


class HeaderOverflowError(CodecError):
    """Length table cannot be recorded in one-byte header fields."""


class MalformedHeaderError(CodecError):
    pass


class InvalidDataError(CodecError):
    pass
