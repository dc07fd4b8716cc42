"""Display output: PNG simulation or a Linux framebuffer."""
from pathlib import Path

import numpy as np
from PIL import Image


class DisplayDriver:
    """Presents rendered frames on the configured output."""

    def __init__(self, width=320, height=400, mode='simulation',
                 output_path=None, framebuffer_device='/dev/fb0'):
        self.width = width
        self.height = height
        self.simulation_mode = mode != 'framebuffer'
        self.framebuffer_device = Path(framebuffer_device)
        self.fb_file = None
        self.fb_size = None
        self.fb_bpp = None
        self.frames = 0
        self.initialized = False

        if output_path is None:
            output_path = Path.cwd() / ".cache" / "display_output.png"
        self.output_path = Path(output_path)

    def init(self):
        """Open the output device."""
        if self.initialized:
            return

        if not self.simulation_mode:
            try:
                self._open_framebuffer()
                print(f"Framebuffer initialized: {self.fb_size[0]}x{self.fb_size[1]}, {self.fb_bpp}bpp")
            except OSError as e:
                print(f"Framebuffer not available ({e}), falling back to simulation mode")
                self.simulation_mode = True

        if self.simulation_mode:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            print(f"[SIMULATION] Display initialized, frames go to {self.output_path}")

        self.initialized = True

    def _open_framebuffer(self):
        """Read framebuffer geometry from sysfs and open the device."""
        sysfs = Path('/sys/class/graphics') / self.framebuffer_device.name
        size_str = (sysfs / 'virtual_size').read_text().strip()
        fb_width, fb_height = (int(v) for v in size_str.split(','))
        self.fb_bpp = int((sysfs / 'bits_per_pixel').read_text().strip())
        if self.fb_bpp not in (16, 32):
            raise OSError(f"unsupported framebuffer depth {self.fb_bpp}bpp")
        self.fb_size = (fb_width, fb_height)
        self.fb_file = open(self.framebuffer_device, 'r+b')

    def display_image(self, image: Image.Image):
        """
        Show a frame.

        Args:
            image: PIL Image object (converted to RGB if needed)
        """
        if not self.initialized:
            self.init()

        if image.mode != 'RGB':
            image = image.convert('RGB')

        if self.simulation_mode:
            if image.size != (self.width, self.height):
                image = image.resize((self.width, self.height))
            # Write then rename so viewers never see a half-written file
            tmp_path = self.output_path.with_suffix('.tmp.png')
            image.save(tmp_path)
            tmp_path.replace(self.output_path)
        else:
            self.fb_file.seek(0)
            self.fb_file.write(self.to_framebuffer_bytes(image, self.fb_size, self.fb_bpp))
            self.fb_file.flush()

        self.frames += 1

    @staticmethod
    def to_framebuffer_bytes(image: Image.Image, fb_size, bpp) -> bytes:
        """Convert an RGB image to raw framebuffer pixels (RGB565 or BGRA)."""
        canvas = Image.new('RGB', fb_size, (0, 0, 0))
        # Center the frame; framebuffer may be larger than the clock
        offset = ((fb_size[0] - image.width) // 2, (fb_size[1] - image.height) // 2)
        canvas.paste(image, offset)
        pixels = np.asarray(canvas, dtype=np.uint16)

        if bpp == 16:
            r = (pixels[:, :, 0] >> 3) & 0x1F
            g = (pixels[:, :, 1] >> 2) & 0x3F
            b = (pixels[:, :, 2] >> 3) & 0x1F
            return ((r << 11) | (g << 5) | b).astype('<u2').tobytes()

        bgra = np.empty(pixels.shape[:2] + (4,), dtype=np.uint8)
        bgra[:, :, 0] = pixels[:, :, 2]
        bgra[:, :, 1] = pixels[:, :, 1]
        bgra[:, :, 2] = pixels[:, :, 0]
        bgra[:, :, 3] = 255
        return bgra.tobytes()

    def clear(self, color=(0, 0, 0)):
        """Fill the display with one colour."""
        self.display_image(Image.new('RGB', (self.width, self.height), color))

    def close(self):
        """Release the output device."""
        if self.fb_file is not None:
            self.fb_file.close()
            self.fb_file = None
        if self.simulation_mode and self.initialized:
            print(f"[SIMULATION] Display closed after {self.frames} frames")
        self.initialized = False
