import pytest

from acequia.model import Canal, Region, WaterSource, WaterSourceType


def make_region(name="R", level=50.0, need=40.0, capacity=100.0):
    return Region(name, level, need, capacity)


def test_flooding_caps_level_at_capacity():
    region = make_region(level=50.0, capacity=100.0)
    region.update_water_level(80.0)
    assert region.water_level == region.water_capacity
    assert region.is_flooded
    assert not region.is_in_drought
    assert region.overflow == 1


def test_level_between_need_and_capacity_clears_flags():
    region = make_region(level=50.0, need=40.0, capacity=100.0)
    region.is_flooded = True
    region.is_in_drought = True
    region.update_water_level(5.0)
    assert region.water_level == pytest.approx(55.0)
    assert not region.is_flooded
    assert not region.is_in_drought
    assert region.overflow == 0
    assert region.drought == 0


def test_below_need_but_above_drought_line_is_neither():
    region = make_region(level=30.0, need=40.0, capacity=100.0)
    region.update_water_level(0)
    assert not region.is_flooded
    assert not region.is_in_drought
    assert region.drought == 0


def test_drought_below_fifth_of_capacity():
    region = make_region(level=10.0, need=40.0, capacity=100.0)
    region.update_water_level(0)
    assert region.is_in_drought
    assert not region.is_flooded
    assert region.drought == 1


def test_negative_level_is_clamped_to_zero():
    region = make_region(level=5.0, need=40.0, capacity=100.0)
    region.update_water_level(-10.0)
    assert region.water_level == 0
    assert region.is_in_drought
    assert not region.is_flooded
    assert region.drought == 1


def test_add_water_source_keeps_order():
    region = make_region()
    river = WaterSource("Rio Grande", WaterSourceType.RIVER, 100.0)
    dam = WaterSource("Elephant Butte Dam", WaterSourceType.DAM, 150.0)
    region.add_water_source(river)
    region.add_water_source(dam)
    assert region.supplied_water == [river, dam]


def test_water_source_update():
    source = WaterSource("Pecos", WaterSourceType.RIVER, 80.0)
    source.update_water_level(-30.0)
    assert source.water_level == pytest.approx(50.0)


def _canal(flow_rate, is_open):
    src = make_region("North", level=50.0, need=10.0, capacity=100.0)
    dst = make_region("South", level=30.0, need=10.0, capacity=100.0)
    water = WaterSource("Rio Grande", WaterSourceType.RIVER, 100.0)
    canal = Canal("Canal A", src, dst, water, flow_rate=flow_rate, is_open=is_open)
    return canal, src, dst


def test_closed_canal_moves_nothing():
    canal, src, dst = _canal(1.0, False)
    canal.update_water(3600)
    assert src.water_level == 50.0
    assert dst.water_level == 30.0


def test_open_canal_conserves_water():
    canal, src, dst = _canal(0.7, True)
    canal.update_water(3600)
    assert src.water_level < 50.0
    assert dst.water_level > 30.0
    assert src.water_level + dst.water_level == pytest.approx(80.0)


def test_open_canal_amount_per_thousand():
    canal, src, dst = _canal(1.0, True)
    canal.update_water(1000)
    assert dst.water_level == pytest.approx(31.0)


def test_zero_seconds_moves_nothing():
    canal, src, dst = _canal(1.0, True)
    canal.update_water(0)
    assert src.water_level == 50.0
    assert dst.water_level == 30.0


def test_canal_defaults_closed_with_no_flow():
    water = WaterSource("Pecos", WaterSourceType.RIVER, 80.0)
    canal = Canal("Canal C", make_region(), make_region(), water)
    assert canal.is_open is False
    assert canal.flow_rate == 0.0