import logging
import struct
from pathlib import Path
import numpy as np
from bmpr.render.canvas import Canvas

logger = logging.getLogger(__name__)

# константы формата BMP (24 бита, без сжатия)
SIGNATURE = 0x4D42  # 'BM'
INFO_HEADER_SIZE = 40
PLANES = 1
BIT_DEPTH = 24
COMPRESSION_NONE = 0
BYTES_PER_PIXEL = 3


def row_size(width: int) -> int:
    """
    Длина строки пикселей в байтах вместе с выравниванием.
    width * 3 + width % 4 всегда кратно 4, т.к. 3 * width + width = 4 * width.
    """
    return width * BYTES_PER_PIXEL + width % 4


class BitmapHeader:
    """
    Заголовок BMP (54 байта): BITMAPFILEHEADER (14) + BITMAPINFOHEADER (40).
    Все многобайтовые поля little-endian.
    """

    HEADER_FMT = '<H I I I I i i H H I I i i I I'
    HEADER_SIZE = struct.calcsize(HEADER_FMT)  # 54 байта

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.image_size = row_size(width) * height
        self.file_size = self.HEADER_SIZE + self.image_size
        self.data_offset = self.HEADER_SIZE

    @classmethod
    def for_canvas(cls, canvas: Canvas) -> 'BitmapHeader':
        return cls(canvas.width, canvas.height)

    def pack(self) -> bytes:
        return struct.pack(
            self.HEADER_FMT,
            SIGNATURE,
            self.file_size,
            0,  # reserved
            self.data_offset,
            INFO_HEADER_SIZE,
            self.width,
            self.height,
            PLANES,
            BIT_DEPTH,
            COMPRESSION_NONE,
            self.image_size,
            0,  # горизонтальное разрешение, пикс/м
            0,  # вертикальное разрешение, пикс/м
            0,  # colors used
            0,  # colors important (0 = все)
        )

    def __repr__(self) -> str:
        return f"BitmapHeader(width={self.width}, height={self.height}, file_size={self.file_size})"


def encode_pixels(canvas: Canvas) -> bytes:
    """
    Пиксельные данные BMP: строки снизу вверх, в строке слева направо,
    3 байта на пиксель в порядке B, G, R, в конце строки нулевое выравнивание.
    """
    width, height = canvas.width, canvas.height
    padding = row_size(width) - width * BYTES_PER_PIXEL

    # [::-1] по строкам - начало координат BMP в левом нижнем углу, [..., ::-1] - RGB -> BGR
    rows = canvas.pixels[::-1, :, ::-1].reshape(height, width * BYTES_PER_PIXEL)
    if padding:
        rows = np.hstack((rows, np.zeros((height, padding), dtype=np.uint8)))
    return rows.tobytes()


def encode(canvas: Canvas) -> bytes:
    """Возвращает полный BMP файл в памяти"""
    return BitmapHeader.for_canvas(canvas).pack() + encode_pixels(canvas)


def _remove_partial(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"Could not remove partial bitmap {path}: {e}")


def save(canvas: Canvas, path: str | Path) -> bool:
    """
    Сохраняет холст в BMP файл. Возвращает False, если файл не открылся на запись
    или запись оборвалась (недописанный файл при этом удаляется).
    """
    path = Path(path)
    data = encode(canvas)

    try:
        ofs = open(path, "wb")
    except OSError as e:
        logger.error(f"Cannot open {path} for writing: {e}")
        return False

    try:
        with ofs:
            ofs.write(data)
    except OSError as e:
        logger.error(f"Failed to write bitmap {path}: {e}")
        _remove_partial(path)
        return False

    logger.debug(f"Bitmap saved: {path} ({canvas.width}x{canvas.height}, {len(data)} bytes)")
    return True
