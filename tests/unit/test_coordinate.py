"""
Тесты для модели Coordinate

Проверяет:
1. Конструкторы по kind и значения по умолчанию
2. Неизменяемость kind
3. NaN для отсутствующих ординат, ValueError при их записи
4. Сравнения (2D, с толерантностью, точное) и расстояния
5. Определение kind/dimension для списков координат
"""

import math

import pytest
from pydantic import ValidationError

from geomcore.core.geom.coordinate import (
    M,
    X,
    Y,
    Z,
    Coordinate,
    CoordinateKind,
    coordinates_dimension,
    coordinates_kind,
    coordinates_measures,
    create_coordinate,
    dimension_of,
    measures_of,
)


class TestCoordinateKind:
    """Тесты для CoordinateKind"""

    @pytest.mark.parametrize(
        "kind,dimension,measures",
        [
            (CoordinateKind.XY, 2, 0),
            (CoordinateKind.XYZ, 3, 0),
            (CoordinateKind.XYM, 3, 1),
            (CoordinateKind.XYZM, 4, 1),
        ],
    )
    def test_dimension_and_measures(self, kind, dimension, measures) -> None:
        """dimension/measures соответствуют kind и обратно"""
        assert kind.dimension == dimension
        assert kind.measures == measures
        assert CoordinateKind.from_dimension(dimension, measures) is kind

    def test_unsupported_layout_falls_back_to_xyz(self) -> None:
        assert CoordinateKind.from_dimension(5, 0) is CoordinateKind.XYZ


class TestCoordinateConstruction:
    """Тесты создания координат"""

    def test_default_is_xyz_origin(self) -> None:
        """По умолчанию: (0, 0, NaN), kind XYZ"""
        c = Coordinate()
        assert c.kind is CoordinateKind.XYZ
        assert c.x == 0.0 and c.y == 0.0
        assert math.isnan(c.z)
        assert math.isnan(c.m)

    def test_named_constructors(self) -> None:
        assert Coordinate.xy(1, 2).kind is CoordinateKind.XY
        assert Coordinate.xyz(1, 2, 3).z == 3.0
        assert Coordinate.xym(1, 2, 4).m == 4.0
        c = Coordinate.xyzm(1, 2, 3, 4)
        assert (c.x, c.y, c.z, c.m) == (1.0, 2.0, 3.0, 4.0)

    def test_absent_ordinate_value_rejected(self) -> None:
        """Нельзя задать Z для XY или M для XYZ"""
        with pytest.raises(ValidationError, match="does not support z-ordinate"):
            Coordinate(x=1, y=2, z=3, kind=CoordinateKind.XY)
        with pytest.raises(ValidationError, match="does not support m-ordinate"):
            Coordinate(x=1, y=2, m=3, kind=CoordinateKind.XYZ)

    def test_kind_is_frozen(self) -> None:
        """kind нельзя изменить после создания"""
        c = Coordinate.xy(1, 2)
        with pytest.raises(ValidationError):
            c.kind = CoordinateKind.XYZ

    def test_create_coordinate_defaults(self) -> None:
        """Пустые координаты по dimension/measures"""
        xy = create_coordinate(2)
        assert xy.kind is CoordinateKind.XY

        xyz = create_coordinate(3)
        assert xyz.kind is CoordinateKind.XYZ
        assert math.isnan(xyz.z)

        xym = create_coordinate(3, 1)
        assert xym.kind is CoordinateKind.XYM
        assert xym.m == 0.0

        xyzm = create_coordinate(4, 1)
        assert xyzm.kind is CoordinateKind.XYZM
        assert xyzm.z == 0.0 and xyzm.m == 0.0


class TestOrdinateAccess:
    """Тесты kind-aware доступа к ординатам"""

    def test_missing_ordinates_read_nan(self) -> None:
        c = Coordinate.xy(1, 2)
        assert math.isnan(c.get_z())
        assert math.isnan(c.get_m())
        assert math.isnan(c.get_ordinate(Z))
        assert math.isnan(c.get_ordinate(M))

    def test_xym_ordinate_layout(self) -> None:
        """Для XYM индекс 2 — это M"""
        c = Coordinate.xym(1, 2, 7)
        assert c.get_ordinate(2) == 7.0
        assert math.isnan(c.get_z())
        assert c.get_m() == 7.0

    def test_xyzm_ordinate_layout(self) -> None:
        c = Coordinate.xyzm(1, 2, 3, 4)
        assert [c.get_ordinate(i) for i in range(4)] == [1.0, 2.0, 3.0, 4.0]

    def test_invalid_ordinate_index_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid ordinate index"):
            Coordinate.xy(1, 2).get_ordinate(4)

    def test_set_ordinate(self) -> None:
        c = Coordinate.xyzm(0, 0, 0, 0)
        c.set_ordinate(X, 1.0)
        c.set_ordinate(Y, 2.0)
        c.set_ordinate(Z, 3.0)
        c.set_ordinate(M, 4.0)
        assert c == Coordinate.xyzm(1, 2, 3, 4)

    def test_set_missing_ordinate_raises(self) -> None:
        c = Coordinate.xy(1, 2)
        with pytest.raises(ValueError, match="does not support z-ordinate"):
            c.set_z(1.0)
        with pytest.raises(ValueError, match="does not support m-ordinate"):
            c.set_m(1.0)
        with pytest.raises(ValueError, match="does not support ordinate index 2"):
            c.set_ordinate(2, 1.0)

    def test_set_coordinate_copies_own_ordinates_only(self) -> None:
        """set_coordinate берёт только ординаты своего kind"""
        target = Coordinate.xy(0, 0)
        target.set_coordinate(Coordinate.xyzm(1, 2, 3, 4))
        assert target == Coordinate.xy(1, 2)

        target_m = Coordinate.xym(0, 0, 0)
        target_m.set_coordinate(Coordinate.xyzm(1, 2, 3, 4))
        assert target_m.m == 4.0


class TestCoordinateComparison:
    """Тесты сравнений и расстояний"""

    def test_exact_equality_nan_aware(self) -> None:
        """Точное равенство: NaN == NaN, kind не сравнивается"""
        assert Coordinate.xyz(1, 2) == Coordinate.xy(1, 2)
        assert Coordinate.xyz(1, 2, 3) != Coordinate.xy(1, 2)
        assert Coordinate.xym(1, 2, 3) == Coordinate.xym(1, 2, 3)

    def test_equals_2d_ignores_z(self) -> None:
        assert Coordinate.xyz(1, 2, 3).equals_2d(Coordinate.xyz(1, 2, 9))
        assert not Coordinate.xy(1, 2).equals_2d(Coordinate.xy(1, 2.1))

    def test_equals_2d_with_tolerance(self) -> None:
        """Каноническое "та же точка" — X/Y в пределах tolerance"""
        a = Coordinate.xy(100.0, 200.0)
        assert a.equals_2d_with_tolerance(Coordinate.xy(100.05, 199.95), 0.1)
        assert not a.equals_2d_with_tolerance(Coordinate.xy(100.2, 200.0), 0.1)

    def test_equals_3d(self) -> None:
        assert Coordinate.xyz(1, 2, 3).equals_3d(Coordinate.xyz(1, 2, 3))
        assert not Coordinate.xyz(1, 2, 3).equals_3d(Coordinate.xyz(1, 2, 4))

    def test_compare_to(self) -> None:
        assert Coordinate.xy(0, 5).compare_to(Coordinate.xy(1, 0)) == -1
        assert Coordinate.xy(1, 0).compare_to(Coordinate.xy(1, -1)) == 1
        assert Coordinate.xy(1, 1).compare_to(Coordinate.xy(1, 1)) == 0

    def test_distance(self) -> None:
        assert Coordinate.xy(0, 0).distance(Coordinate.xy(3, 4)) == 5.0
        assert Coordinate.xyz(0, 0, 0).distance_3d(Coordinate.xyz(2, 3, 6)) == 7.0

    def test_distance_no_overflow(self) -> None:
        """hypot не переполняется на больших значениях"""
        d = Coordinate.xy(0, 0).distance(Coordinate.xy(3e200, 4e200))
        assert d == pytest.approx(5e200)

    def test_is_valid(self) -> None:
        assert Coordinate.xy(1, 2).is_valid()
        assert not Coordinate.xy(float("inf"), 2).is_valid()

    def test_copy_is_independent(self) -> None:
        source = Coordinate.xyz(1, 2, 3)
        duplicate = source.copy_coordinate()
        duplicate.x = 10.0
        assert source.x == 1.0
        assert duplicate.kind is CoordinateKind.XYZ


class TestCoordinateLists:
    """Тесты определения kind для списков"""

    def test_empty_list_defaults(self) -> None:
        assert coordinates_kind([]) is CoordinateKind.XYZ
        assert coordinates_dimension([]) == 3
        assert coordinates_measures([]) == 0

    def test_uniform_lists(self) -> None:
        assert coordinates_kind([Coordinate.xy(0, 0), Coordinate.xy(1, 1)]) is CoordinateKind.XY
        assert coordinates_dimension([Coordinate.xyzm(0, 0, 0, 0)]) == 4

    def test_mixed_list_union(self) -> None:
        """Смешанный список → наименьший kind, вмещающий все элементы"""
        pts = [Coordinate.xyz(0, 0, 1), Coordinate.xym(1, 1, 5)]
        assert coordinates_kind(pts) is CoordinateKind.XYZM
        assert coordinates_measures(pts) == 1

    @pytest.mark.parametrize(
        "coordinate,dimension,measures",
        [
            (Coordinate.xy(0, 0), 2, 0),
            (Coordinate.xyz(0, 0, 0), 3, 0),
            (Coordinate.xym(0, 0, 0), 3, 1),
            (Coordinate.xyzm(0, 0, 0, 0), 4, 1),
        ],
    )
    def test_single_coordinate_layout(self, coordinate, dimension, measures) -> None:
        """dimension_of / measures_of для одной координаты"""
        assert dimension_of(coordinate) == dimension
        assert measures_of(coordinate) == measures
