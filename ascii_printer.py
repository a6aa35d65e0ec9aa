import sys
from PIL import Image
import numpy as np
from tqdm import tqdm

from errors import ERRORS, ImageError, ConfigurationError

DEFAULT_CHARS = ". ' , ^ \" ~ + - = # @ $" # least to most intense, spaces are separators only
DEFAULT_SCALE = 3
LUMA = np.array([0.2989, 0.5870, 0.1140], dtype=np.float32) # BT.601-style weights for R, G, B

strip_whitespace = lambda chars: ''.join(chars.split())

def to_rgb(raw):
    '''
    desc: 8-bit RGB copy of a decoded image; 16-bit samples keep their high byte
    params:
        raw = image as opened by Pillow
    return: RGB image
    '''

    if raw.mode.startswith('I'):
        wide = np.clip(np.asarray(raw, dtype=np.int64), 0, 65535)
        raw = Image.fromarray((wide >> 8).astype(np.uint8))
    return raw.convert('RGB')

class AsciiPrinter:
    '''
    desc: turns an image into rows of characters by sampling every scale-th column
          and every (2*scale)-th row, then bucketing each sample's luminance into the palette
    '''

    def __init__(self):
        self.src_img = None # None -> not loaded, Image -> loaded, ImageError -> load failed
        self.chars = [' '] + list(strip_whitespace(DEFAULT_CHARS))
        self.scale = DEFAULT_SCALE

    def load_image(self, path):
        '''
        desc: decode the image at path; a failure is kept and only raised by render()
        params:
            path = image file path, any format Pillow can read
        return: self
        '''

        try:
            with Image.open(path) as raw:
                self.src_img = to_rgb(raw)
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            self.src_img = ImageError(str(e))
        return self

    def set_chars(self, chars):
        # index 0 is always a space for intensity 0
        self.chars = [' '] + list(chars)
        return self

    def set_scale(self, scale):
        if scale < 1:
            raise ConfigurationError(ERRORS["bad_scale"] % scale)
        self.scale = scale
        return self

    @staticmethod
    def get_pixel_intensity(red, green, blue):
        return float(np.dot(LUMA, np.array([red, green, blue], dtype=np.float32)))

    def get_char(self, intensity):
        return self.chars[self.bucket(intensity)]

    def bucket(self, intensity):
        '''
        desc: palette index of an intensity (or array of them), floor(i / (256 / n)) kept inside [0, n-1]
        params:
            intensity = scalar or array in [0, 255]
        return: int, or int array of the same shape
        '''

        n = len(self.chars)
        index = np.floor(np.asarray(intensity, dtype=np.float32) / np.float32(256 / n)).astype(np.int64)
        index = np.clip(index, 0, n - 1)
        return int(index) if index.ndim == 0 else index

    def sample_row(self, image, y):
        # only row y leaves Pillow, never the whole bitmap
        row = np.asarray(image.crop((0, y, image.width, y + 1)))[0, ::self.scale, :3]
        return row.astype(np.float32) @ LUMA

    def sample(self, image):
        return np.array([self.sample_row(image, y) for y in range(0, image.height, self.scale*2)])

    def image(self):
        if self.src_img is None:
            raise ImageError(ERRORS["no_image"])
        if isinstance(self.src_img, ImageError):
            raise self.src_img
        return self.src_img

    def lines(self):
        '''
        desc: text rows of the rendering, one per sampled image row
        return: generator of strings (no newline)
        '''

        palette = np.array(self.chars)
        src = self.image()
        for y in range(0, src.height, self.scale*2):
            yield ''.join(palette[self.bucket(self.sample_row(src, y))])

    def render(self, out=None, progress=False):
        '''
        desc: write the rendering to out, each sampled row on its own line plus one trailing blank line
        params:
            out = text stream, sys.stdout if None
            progress = show a progress bar over rows on stderr
        return: none
        '''

        out = sys.stdout if out is None else out
        src = self.image()
        rows = tqdm(self.lines(), desc='rendering rows', total=-(-src.height // (self.scale*2)), disable=not progress)
        for line in rows:
            out.write(line + '\n')
        out.write('\n')
