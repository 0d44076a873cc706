import pytest

from tilequest.postprocessing import (
    MAX_GAUSSIAN_BLUR_ITERATIONS,
    PostProcessor,
    map_world_to_target,
)
from tilequest.vecmath import Vec2

CAM_MIN = Vec2(10.0, 20.0)
CAM_MAX = Vec2(110.0, 70.0)


def test_map_world_to_target_corners():
    assert map_world_to_target(CAM_MIN, CAM_MIN, CAM_MAX, 320, 180) == Vec2(0.0, 0.0)
    assert map_world_to_target(CAM_MAX, CAM_MIN, CAM_MAX, 320, 180) == Vec2(320.0, 180.0)


def test_map_world_to_target_midpoint():
    mid = (CAM_MIN + CAM_MAX) / 2
    result = map_world_to_target(mid, CAM_MIN, CAM_MAX, 320, 180)
    assert result.x == pytest.approx(320 / 2)
    assert result.y == pytest.approx(180 / 2)


def test_add_shockwave_starts_with_source_force():
    pp = PostProcessor((320, 180))
    wave = pp.add_shockwave(Vec2(5.0, 5.0))
    assert wave.force == pytest.approx(0.2)
    assert wave.size == 0.0 and wave.thickness == 0.0
    assert pp.shockwaves == (wave,)


def test_update_grows_and_weakens_shockwave():
    pp = PostProcessor((320, 180))
    wave = pp.add_shockwave(Vec2())
    pp.update(0.1)
    assert 0.0 < wave.force < 0.2
    assert wave.size > 0.0
    assert wave.thickness > 0.0
    assert wave.size > wave.thickness


def test_update_removes_spent_shockwaves():
    pp = PostProcessor((320, 180))
    pp.add_shockwave(Vec2())
    pp.update(0.5)
    assert pp.shockwaves == ()
    assert pp.passes() == []


def test_darkness_intensity_is_clamped():
    pp = PostProcessor((320, 180))
    pp.set_darkness_intensity(3.0)
    assert pp.darkness_intensity == 1.0
    pp.set_darkness_intensity(-2.0)
    assert pp.darkness_intensity == 0.0


def test_screen_transition_progress_is_clamped():
    pp = PostProcessor((320, 180))
    pp.set_screen_transition_progress(-4.0)
    assert pp.screen_transition_progress == -1.0
    pp.set_screen_transition_progress(0.25)
    assert pp.screen_transition_progress == 0.25


def test_blur_iterations_capped():
    pp = PostProcessor((320, 180))
    pp.set_gaussian_blur_iterations(100)
    assert pp.gaussian_blur_iterations == MAX_GAUSSIAN_BLUR_ITERATIONS == 5
    with pytest.raises(ValueError):
        pp.set_gaussian_blur_iterations(-1)


def test_darkness_uniforms_skipped_when_zero():
    pp = PostProcessor((320, 180))
    assert pp.darkness_uniforms(CAM_MIN, CAM_MAX) is None


def test_darkness_uniforms_map_center():
    pp = PostProcessor((320, 180))
    pp.set_darkness_intensity(0.95)
    pp.set_darkness_center(CAM_MAX)
    block = pp.darkness_uniforms(CAM_MIN, CAM_MAX)
    assert block["intensity"] == 0.95
    assert block["center"] == Vec2(320.0, 180.0)
    assert block["resolution"] == Vec2(320.0, 180.0)


def test_shockwave_uniforms_follow_shockwaves():
    pp = PostProcessor((320, 180))
    pp.add_shockwave(CAM_MIN)
    pp.add_shockwave(CAM_MAX)
    blocks = pp.shockwave_uniforms(CAM_MIN, CAM_MAX)
    assert [b["center"] for b in blocks] == [Vec2(0.0, 0.0), Vec2(320.0, 180.0)]
    assert all(b["force"] == pytest.approx(0.2) for b in blocks)


def test_passes_in_documented_order():
    pp = PostProcessor((320, 180))
    pp.add_shockwave(Vec2())
    pp.set_darkness_intensity(0.5)
    pp.set_screen_transition_progress(-0.5)
    pp.set_gaussian_blur_iterations(2)
    assert pp.passes() == [
        "shockwave",
        "darkness",
        "screen_transition",
        "gaussian_blur_horizontal",
        "gaussian_blur_vertical",
        "gaussian_blur_horizontal",
        "gaussian_blur_vertical",
    ]