import importlib
from types import ModuleType

import pytest


def get_attr(module: ModuleType, attr: str):
    parts = attr.split(".")
    result = module
    for name in parts:
        result = getattr(result, name)
    return result


class RegressionTests:
    def test_module(self, module: str):
        try:
            _ = importlib.import_module(module)
        except ImportError:
            raise AssertionError(f"Possible regression; {module} cannot be imported!")

    def test_attribute(self, module: str, attr: str):
        try:
            m = importlib.import_module(module)
            _ = get_attr(m, attr)
        except ImportError:
            raise AssertionError(f"Possible regression; {module} cannot be imported!")
        except AttributeError:
            raise AssertionError(
                f"Possible regression; {attr} cannot be imported from {module}!"
            )


class TestIECSize(RegressionTests):
    @pytest.fixture
    def module(self) -> str:
        return "iec_size"

    def test_module(self, module: str):
        return super().test_module(module)

    @pytest.mark.parametrize("attr", [])
    def test_attribute(self, module: str, attr: str):
        return super().test_attribute(module, attr)


class TestSize(RegressionTests):
    @pytest.fixture
    def module(self) -> str:
        return "iec_size.size"

    def test_module(self, module: str):
        return super().test_module(module)

    @pytest.mark.parametrize(
        "attr",
        ["B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB", "IEC_PREFIXES", "IEC_SUFFIXES"],
    )
    def test_attribute(self, module: str, attr: str):
        return super().test_attribute(module, attr)


class TestError(RegressionTests):
    @pytest.fixture
    def module(self) -> str:
        return "iec_size.error"

    def test_module(self, module: str):
        return super().test_module(module)

    @pytest.mark.parametrize(
        "attr",
        ["MagnitudeError", "NegativeMagnitudeError", "MagnitudeTooLargeError", "width_overflow_error"],
    )
    def test_attribute(self, module: str, attr: str):
        return super().test_attribute(module, attr)


class TestBucket(RegressionTests):
    @pytest.fixture
    def module(self) -> str:
        return "iec_size.bucket"

    def test_module(self, module: str):
        return super().test_module(module)

    @pytest.mark.parametrize(
        "attr",
        ["SENTINEL_BUCKET", "MAX_MAGNITUDE", "as_magnitude", "select_bucket", "divisor_for_bucket"],
    )
    def test_attribute(self, module: str, attr: str):
        return super().test_attribute(module, attr)


_IEC_ALL = [
    "IECUnit",
    "IECUnit.divisor",
    "IECUnit.suffix",
    "IEC",
    "IEC.from_integer",
    "IEC.B",
    "IEC.KiB",
    "IEC.MiB",
    "IEC.GiB",
    "IEC.TiB",
    "IEC.PiB",
    "IEC.EiB",
    "IEC.suffix",
    "IEC.divisor",
    "IEC.raw_value",
    "IEC.to_display_string",
    "format_iec",
]


class TestIEC(RegressionTests):
    @pytest.fixture
    def module(self) -> str:
        return "iec_size.iec"

    def test_module(self, module: str):
        return super().test_module(module)

    @pytest.mark.parametrize("attr", _IEC_ALL)
    def test_attribute(self, module: str, attr: str):
        return super().test_attribute(module, attr)


_WIDTHS_ALL = [
    "unpack_iec",
    "unpack_iec_stream",
    "iter_unpack_iec_stream",
    "IntWidth",
    "IntWidth.check",
    "IntWidth.to_iec",
    "IntWidth.unpack_iec",
    "IntWidth.unpack_iec_from",
    "IntWidth.unpack_iec_stream",
    "IntWidth.iter_unpack_iec_stream",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "ISize",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "USize",
]


class TestWidths(RegressionTests):
    @pytest.fixture
    def module(self) -> str:
        return "iec_size.widths"

    def test_module(self, module: str):
        return super().test_module(module)

    @pytest.mark.parametrize("attr", _WIDTHS_ALL)
    def test_attribute(self, module: str, attr: str):
        return super().test_attribute(module, attr)
