from unittest import mock

from fpimport import properties
from fpimport.properties import (
    VersionNumber,
    image_mode_order,
    install_matches_target_series,
    parse_version,
)
from fpimport.settings import ImageMode


def test_parse_segments():
    assert parse_version("1.2.3").segments == (1, 2, 3)


def test_parse_round_trip():
    assert str(parse_version("13.0.1")) == "13.0.1"


def test_parse_stops_at_suffix():
    assert parse_version("2.4-beta") == parse_version("2.4")


def test_parse_garbage_is_null():
    assert parse_version("abc").is_null is True
    assert parse_version("").is_null is True


def test_normalized_strips_trailing_zeros():
    assert parse_version("13.0.0").normalized() == parse_version("13")


def test_normalized_keeps_inner_zeros():
    assert parse_version("1.0.2").normalized() == parse_version("1.0.2")


def test_normalized_keeps_single_zero():
    assert parse_version("0.0").normalized() == parse_version("0")


def test_prefix():
    prefix = parse_version("13.0")
    assert prefix.is_prefix_of(parse_version("13.0.2")) is True
    assert prefix.is_prefix_of(parse_version("13.1")) is False
    assert prefix.is_prefix_of(parse_version("13")) is False


def test_null_is_prefix_of_anything():
    assert VersionNumber().is_prefix_of(parse_version("4.5")) is True


def test_ordering():
    assert parse_version("12.9") < parse_version("13.0")
    assert parse_version("13.1") > parse_version("13.0.5")


def test_matches_within_series():
    assert install_matches_target_series(parse_version("13.0.1"), parse_version("13.0")) is True


def test_matches_without_trailing_zero():
    assert install_matches_target_series("13", "13.0") is True


def test_does_not_match_other_series():
    assert install_matches_target_series("12.1", "13.0") is False
    assert install_matches_target_series("13.1", "13.0") is False


def test_link_permissions_false_when_symlink_fails():
    with mock.patch("os.symlink", side_effect=OSError("denied")):
        assert properties.test_for_link_permissions() is False


def test_link_permissions_true_when_symlink_succeeds():
    with mock.patch("os.symlink") as fake:
        assert properties.test_for_link_permissions() is True
        assert fake.call_count == 1


def test_default_image_mode_order():
    assert image_mode_order(None, True) == [ImageMode.LINK, ImageMode.REFERENCE, ImageMode.COPY]


def test_default_order_without_link_perms():
    assert image_mode_order(None, False) == [ImageMode.REFERENCE, ImageMode.COPY]


def test_preferred_order_kept_and_not_mutated():
    preferred = [ImageMode.COPY, ImageMode.LINK, ImageMode.REFERENCE]
    result = image_mode_order(preferred, False)
    assert result == [ImageMode.COPY, ImageMode.REFERENCE]
    assert preferred == [ImageMode.COPY, ImageMode.LINK, ImageMode.REFERENCE]


def test_preferred_order_with_link_perms():
    preferred = (ImageMode.REFERENCE, ImageMode.LINK)
    assert image_mode_order(preferred, True) == list(preferred)