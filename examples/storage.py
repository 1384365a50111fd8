"""Registries and persistence: custom resource types and named disks."""

import tempfile
from pathlib import Path

from mediares import DiskManager, File, InMemoryDisk, LocalDisk, MappingUploadSource, ResourceFactory, StorageTarget

# Append File as a catch-all after the default image type.
factory = ResourceFactory.from_dict({"resources": {"image": "mediares:Image", "file": "mediares:File"}})
print(f"trial order: {list(factory.resources())}")

# Uploaded values come from an injected upload source.
uploads = MappingUploadSource({"attachment": b"name,total\nwidget,3\n"})
attachment = factory.request("attachment", uploads=uploads).set_filename("totals.csv")
print(attachment)
print(f"is file: {factory.is_type(attachment, 'file')}")

with tempfile.TemporaryDirectory() as tmpdir:
    local = LocalDisk(Path(tmpdir) / "media")
    disks = DiskManager(
        {"local": local, "cache": InMemoryDisk(name="cache")},
        default="local",
    )

    target = StorageTarget(disk="local", relative_path="reports/totals.csv")
    print(f"stored: {attachment.store(target, disks)}")
    stored = local.path(target.relative_path)

    cached = disks.disk("cache")
    cached.put("reports/totals.csv", attachment.encode())
    print(f"cache has copy: {cached.exists('reports/totals.csv')}")

    # A path keeps its base name unless one is given.
    reread = factory.path(stored)
    assert isinstance(reread, File)
    print(f"reread: {reread.filename} ({reread.mime}, {reread.size} bytes)")
