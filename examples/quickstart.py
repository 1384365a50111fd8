"""Basic usage: resolve raw input into a typed resource."""

import io
import logging

from PIL import Image as PILImage

from mediares import ColorSource, Image, ResourceFactory, UnresolvableInputError

logging.basicConfig(level=logging.DEBUG)

# Encode a small two-tone PNG in memory.
canvas = PILImage.new("RGB", (40, 30), (200, 40, 40))
canvas.paste((20, 20, 160), (0, 20, 40, 30))
buffer = io.BytesIO()
canvas.save(buffer, format="PNG")

# The default registry tries "image" only.
factory = ResourceFactory()
resource = factory.make(buffer.getvalue()).set_filename("banner.png")
print(resource)
print(f"attributes: {resource.attributes()}")
print(f"is image: {factory.is_type(resource, 'image')}")

# Color extraction is a capability, not part of every resource.
if isinstance(resource, ColorSource):
    print(f"dominant color: {resource.color(output_format='hex')}")
    print(f"palette: {resource.palette(color_count=3, output_format='rgb')}")

# Pillow operations go through call(); image results replace the wrapped image.
assert isinstance(resource, Image)
resource.call("thumbnail", (20, 20))
print(f"after thumbnail: {resource.width}x{resource.height}")
print(f"jpeg bytes: {len(resource.encode('jpg', quality=80))}")

# Input nobody accepts raises with the per-type rejections attached.
try:
    factory.make(b"not an image")
except UnresolvableInputError as exc:
    for key, rejection in exc.rejections:
        print(f"{key} rejected input: {rejection}")
