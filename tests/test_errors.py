"""Tests for mediares.errors."""

from mediares.errors import (
    DiskFileNotFoundError,
    DiskNotFoundError,
    InvalidResourceError,
    MediaresError,
    ResourceConfigurationError,
    UndefinedAttributeError,
    UndefinedMethodError,
    UnresolvableInputError,
)


def test_mediares_error_is_exception() -> None:
    assert issubclass(MediaresError, Exception)


def test_all_errors_are_mediares_errors() -> None:
    for error_type in (
        InvalidResourceError,
        UnresolvableInputError,
        ResourceConfigurationError,
        UndefinedAttributeError,
        UndefinedMethodError,
        DiskNotFoundError,
        DiskFileNotFoundError,
    ):
        assert issubclass(error_type, MediaresError)


def test_rejection_and_exhaustion_are_distinct() -> None:
    assert not issubclass(UnresolvableInputError, InvalidResourceError)
    assert not issubclass(InvalidResourceError, UnresolvableInputError)


def test_resource_errors_are_not_os_errors() -> None:
    assert not issubclass(InvalidResourceError, OSError)
    assert not issubclass(UnresolvableInputError, OSError)


def test_unresolvable_input_default_message() -> None:
    err = UnresolvableInputError()
    assert str(err) == "A resource cannot be created from the given input."
    assert err.rejections == ()
    assert err.tried == ()


def test_unresolvable_input_carries_rejections() -> None:
    rejection = InvalidResourceError("not an image")
    err = UnresolvableInputError(rejections=[("image", rejection)])
    assert err.rejections == (("image", rejection),)
    assert err.tried == ("image",)


def test_undefined_attribute_carries_name() -> None:
    err = UndefinedAttributeError("duration", "Image")
    assert isinstance(err, AttributeError)
    assert err.name == "duration"
    assert err.owner == "Image"
    assert "duration" in str(err)
    assert "Image" in str(err)


def test_undefined_method_carries_name() -> None:
    err = UndefinedMethodError("sharpen", "Image")
    assert isinstance(err, AttributeError)
    assert err.name == "sharpen"
    assert "sharpen" in str(err)


def test_disk_errors_carry_attributes() -> None:
    missing_disk = DiskNotFoundError("s3")
    assert missing_disk.disk == "s3"
    assert "s3" in str(missing_disk)

    missing_file = DiskFileNotFoundError("public", "a/b.png")
    assert missing_file.disk == "public"
    assert missing_file.path == "a/b.png"
    assert "a/b.png" in str(missing_file)
