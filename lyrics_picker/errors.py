class LyricsPickerError(RuntimeError):
    pass


class NotFound(LyricsPickerError):
    """No acceptable lyrics were found (for one source or for all of them)."""


class UnsupportedMediaType(LyricsPickerError):
    pass


class TagReadError(LyricsPickerError):
    pass


class SaveFileError(LyricsPickerError):
    pass
