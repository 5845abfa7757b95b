"""
Тесты для Converter Dispatch — четыре комбинации static/dynamic

Проверяет:
1. static → static (включая пропуск одинаковых тегов без арифметики)
2. dynamic → dynamic
3. static → dynamic
4. dynamic → static
5. Проверку вида домена в именованных вариантах
6. Приведение входа к целому source domain, NaN/Inf на входе
"""

import pytest

from bounded_cast import (
    DegenerateDomainError,
    DomainKindError,
    convert,
    convert_dynamic,
    convert_dynamic_to_static,
    convert_static,
    convert_static_to_dynamic,
    float01,
    float11,
    float_0_and_0_5,
    int8,
    int16,
    make_domain,
    signed_int,
    uint8,
    uint16,
    unsigned_int,
)


class TestStaticToStatic:
    """Тесты static → static"""

    def test_float01_to_uint8(self) -> None:
        assert convert_static(0.5, float01, uint8) == 127

    def test_float11_to_uint8_midpoint(self) -> None:
        assert convert_static(0.0, float11, uint8) == 127

    def test_uint12_to_uint8(self) -> None:
        assert convert_static(1300, unsigned_int(12), uint8) == 80

    def test_uint12_to_signed_12(self) -> None:
        # -2047 + trunc(1300 * 4094 / 4095) = -2047 + 1299
        assert convert_static(1300, unsigned_int(12), signed_int(12)) == -748

    def test_uint12_to_int16_bounds(self) -> None:
        assert convert_static(0, unsigned_int(12), int16) == -32768
        assert convert_static(4095, unsigned_int(12), int16) == 32767

    def test_float11_to_scaled_float(self) -> None:
        assert convert_static(0.0, float11, float_0_and_0_5) == 0.25

    def test_float01_to_uint16(self) -> None:
        assert convert_static(0.5, float01, uint16) == 32767

    def test_float01_to_signed_7(self) -> None:
        assert convert_static(0.5, float01, signed_int(7)) == 0
        assert convert_static(0.0, float01, signed_int(7)) == -63
        assert convert_static(1.0, float01, signed_int(7)) == 63

    def test_truncation_toward_zero_on_signed_target(self) -> None:
        """-128 + 127.5 = -0.5 усекается к 0, а не к -1"""
        assert convert_static(0.0, float11, int8) == 0

    def test_same_tag_passes_value_through(self) -> None:
        assert convert_static(0.3, float01, float01) == 0.3
        assert convert_static(1300, unsigned_int(12), unsigned_int(12)) == 1300

    def test_same_tag_skips_clamp(self) -> None:
        """Одинаковые теги: значение не изменяется, даже вне диапазона"""
        assert convert_static(300, uint8, uint8) == 300


class TestDynamicToDynamic:
    """Тесты dynamic → dynamic"""

    def test_float_source_to_int8_target(self) -> None:
        source = make_domain(100, 200, "float32")
        target = make_domain(-10, 50, "int8")
        assert convert_dynamic(150, source, target) == 20

    def test_float_to_uint8(self) -> None:
        assert convert_dynamic(0.5, make_domain(0.0, 1.0), make_domain(0, 255, "uint8")) == 127

    def test_self_conversion_is_identity(self) -> None:
        domain = make_domain(-10, 50, "int8")
        for value in range(-10, 51):
            assert convert_dynamic(value, domain, domain) == value

    def test_degenerate_source_raises(self) -> None:
        with pytest.raises(DegenerateDomainError):
            convert_dynamic(5, make_domain(5, 5), make_domain(0, 10))

    def test_degenerate_target_maps_to_its_bound(self) -> None:
        assert convert_dynamic(0.7, make_domain(0.0, 1.0), make_domain(5, 5)) == 5


class TestStaticToDynamic:
    """Тесты static → dynamic"""

    def test_uint12_to_float_range(self) -> None:
        target = make_domain(100, 200, "float32")
        result = convert_static_to_dynamic(2047, unsigned_int(12), target)
        assert result == pytest.approx(149.98779, rel=1e-6)

    def test_uint12_to_dynamic_uint8(self) -> None:
        target = make_domain(0, 255, "uint8")
        assert convert_static_to_dynamic(1300, unsigned_int(12), target) == 80

    def test_reified_tag_matches_static_target(self) -> None:
        for value in (0, 600, 1300, 4095):
            assert convert_static_to_dynamic(
                value, unsigned_int(12), make_domain(uint8)
            ) == convert_static(value, unsigned_int(12), uint8)


class TestDynamicToStatic:
    """Тесты dynamic → static"""

    def test_int8_range_to_float01(self) -> None:
        source = make_domain(-10, 50, "int8")
        assert convert_dynamic_to_static(20, source, float01) == 0.5

    def test_out_of_range_clamped(self) -> None:
        source = make_domain(100.0, 200.0)
        assert convert_dynamic_to_static(50.0, source, uint8) == 0
        assert convert_dynamic_to_static(250.0, source, uint8) == 255


class TestDomainKindChecks:
    """Именованные варианты отвергают домен не того вида"""

    def test_static_variant_rejects_dynamic(self) -> None:
        with pytest.raises(DomainKindError, match="StaticDomain"):
            convert_static(0.5, make_domain(0.0, 1.0), uint8)

    def test_dynamic_variant_rejects_static(self) -> None:
        with pytest.raises(DomainKindError, match="DynamicDomain"):
            convert_dynamic(0.5, float01, make_domain(0, 255))

    def test_mixed_variants_check_both_sides(self) -> None:
        with pytest.raises(DomainKindError):
            convert_static_to_dynamic(0.5, float01, uint8)
        with pytest.raises(DomainKindError):
            convert_dynamic_to_static(0.5, make_domain(0.0, 1.0), make_domain(0, 255))

    def test_kind_error_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            convert_static(0.5, make_domain(0.0, 1.0), uint8)


class TestTaggedUnionConvert:
    """convert() принимает любую комбинацию доменов"""

    @pytest.mark.parametrize(
        "source,target",
        [
            (float01, uint8),
            (make_domain(float01), uint8),
            (float01, make_domain(uint8)),
            (make_domain(float01), make_domain(uint8)),
        ],
    )
    def test_all_combinations_agree(self, source, target) -> None:
        assert convert(0.5, source, target) == 127
        assert convert(1.0, source, target) == 255

    def test_fractional_input_truncated_for_integral_source(self) -> None:
        assert convert(1300.9, unsigned_int(12), uint8) == 80

    def test_non_finite_inputs_saturate(self) -> None:
        assert convert(float("nan"), float01, uint8) == 255
        assert convert(float("inf"), float01, uint8) == 255
        assert convert(float("-inf"), float01, uint8) == 0
        assert convert(float("inf"), unsigned_int(12), uint8) == 255
