ERRORS = {
    "no_source": "no line received on stdin",
    "no_source_hint": "No image selected, run with --help for more info",
    "empty_source": "stdin is empty",
    "no_image": "no image selected",
    "bad_scale": "scale must be a positive integer, got %s",
}

class AsciiArtError(Exception):
    '''
    desc: base of every failure that ends an invocation
    params:
        detail = human-readable reason, shown after the category
    '''

    category = "unknown"

    def __init__(self, detail):
        super().__init__(detail)
        self.detail = detail

    def __str__(self):
        return "%s error: %s" % (self.category, self.detail)

class IoError(AsciiArtError):
    category = "io"

class ImageError(AsciiArtError):
    category = "load-image"

class ConfigurationError(AsciiArtError):
    category = "configuration"

class UnknownError(AsciiArtError):
    category = "unknown"
