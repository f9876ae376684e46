import threading
import time
from dataclasses import dataclass, field

import pytest

from alienbase.engine_worker import MonitorData
from alienbase.simulation_controller import SimulationController
from alienbase.vectors import IntVector2D, RealVector2D


@dataclass
class GeneralSettings:
    world_size_x: int = 100
    world_size_y: int = 50


@dataclass
class SpotsSettings:
    spots: list = field(default_factory=lambda: ["a", "b"])


@dataclass
class FlowSettings:
    centers: list = field(default_factory=lambda: ["c0", "c1"])


@dataclass
class Settings:
    simulation_parameters: dict = field(default_factory=lambda: {"friction": 0.1})
    simulation_parameters_spots: SpotsSettings = field(default_factory=SpotsSettings)
    flow_field_settings: FlowSettings = field(default_factory=FlowSettings)
    general_settings: GeneralSettings = field(default_factory=GeneralSettings)


class FakeSimulation:
    def __init__(self, timestep, settings, gpu_settings):
        self.timestep = timestep
        self.settings = settings
        self.gpu_settings = gpu_settings
        self.lock = threading.Lock()
        self.steps = 0
        self.removed_selections = 0
        self.registered_image = None
        self.parameters = None
        self.gpu_constants = None
        self.forces = []
        self.drawn = []

    def register_image_resource(self, image):
        self.registered_image = image
        return ("resource", image)

    def clear(self):
        self.steps = 0

    def draw_vector_graphics(self, upper_left, lower_right, resource, image_size, zoom):
        self.drawn.append((upper_left, lower_right, resource, image_size, zoom))

    def calc_cuda_timestep(self):
        with self.lock:
            self.steps += 1
            self.timestep += 1

    def get_monitor_data(self):
        return MonitorData(time_step=self.timestep, num_cells=7)

    def get_current_timestep(self):
        return self.timestep

    def set_current_timestep(self, value):
        self.timestep = value

    def remove_selection(self):
        self.removed_selections += 1

    def get_selection_shallow_data(self):
        return {"selected": 0}

    def switch_selection(self, pos, radius):
        pass

    def set_selection(self, start, end):
        pass

    def shallow_update_selection(self, data):
        pass

    def set_simulation_parameters(self, parameters):
        self.parameters = parameters

    def set_simulation_parameters_spots(self, spots):
        pass

    def set_gpu_constants(self, gpu_settings):
        self.gpu_constants = gpu_settings

    def set_flow_field_settings(self, settings):
        pass

    def apply_force(self, start, end, force, radius, only_rotation):
        self.forces.append((start, end, force, radius, only_rotation))


def wait_until(predicate, timeout=3.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


@pytest.fixture
def setup():
    created = []

    def factory(timestep, settings, gpu_settings):
        sim = FakeSimulation(timestep, settings, gpu_settings)
        created.append(sim)
        return sim

    controller = SimulationController(factory, {"threads": 64})
    controller.new_simulation(10, Settings(), {"foo": 1})
    yield controller, created
    if controller._thread is not None:
        controller.close_simulation()


def test_world_size_and_general_settings(setup):
    controller, _ = setup
    assert controller.get_world_size() == IntVector2D(100, 50)
    assert controller.get_general_settings() == GeneralSettings()


def test_symbol_map_and_settings_round_trip(setup):
    controller, _ = setup
    assert controller.get_symbol_map() == {"foo": 1}
    assert controller.get_settings() == Settings()


def test_current_timestep_round_trip(setup):
    controller, _ = setup
    assert controller.get_current_timestep() == 10
    controller.set_current_timestep(42)
    assert controller.get_current_timestep() == 42


def test_set_parameters_updates_current_not_original(setup):
    controller, created = setup
    controller.set_simulation_parameters_async({"friction": 0.5})
    assert controller.get_simulation_parameters() == {"friction": 0.5}
    assert controller.get_original_simulation_parameters() == {"friction": 0.1}
    assert wait_until(lambda: created[0].parameters == {"friction": 0.5})


def test_original_spot_changes_only_original(setup):
    controller, _ = setup
    controller.set_original_simulation_parameters_spot("z", 1)
    assert controller.get_original_simulation_parameters_spots().spots == ["a", "z"]
    assert controller.get_simulation_parameters_spots().spots == ["a", "b"]


def test_spots_async_updates_current(setup):
    controller, _ = setup
    controller.set_simulation_parameters_spots_async(SpotsSettings(spots=["q"]))
    assert controller.get_simulation_parameters_spots().spots == ["q"]
    assert controller.get_original_simulation_parameters_spots().spots == ["a", "b"]


def test_original_flow_center_changes_only_original(setup):
    controller, _ = setup
    controller.set_original_flow_field_center("new", 0)
    assert controller.get_original_flow_field_settings().centers == ["new", "c1"]
    assert controller.get_flow_field_settings().centers == ["c0", "c1"]
    controller.set_flow_field_settings_async(FlowSettings(centers=["x"]))
    assert controller.get_flow_field_settings().centers == ["x"]


def test_gpu_settings_current_and_original(setup):
    controller, created = setup
    assert created[0].gpu_settings == {"threads": 64}
    controller.set_gpu_settings_async({"threads": 128})
    assert controller.get_gpu_settings() == {"threads": 128}
    assert controller.get_original_gpu_settings() == {"threads": 64}
    assert wait_until(lambda: created[0].gpu_constants == {"threads": 128})


def test_apply_force_reaches_simulation(setup):
    controller, created = setup
    start, end, force = RealVector2D(1, 2), RealVector2D(3, 4), RealVector2D(0, 1)
    controller.apply_force_async(start, end, force, 2.5)
    assert wait_until(lambda: created[0].forces == [(start, end, force, 2.5, False)])
    assert controller.is_simulation_running() is False
    assert controller.get_current_timestep() == 10


def test_remove_selection_if_invalid(setup):
    controller, created = setup
    assert controller.remove_selection_if_invalid() is True
    assert created[0].removed_selections == 1
    assert controller.remove_selection_if_invalid() is False
    assert created[0].removed_selections == 1
    controller.calc_single_timestep()
    assert controller.remove_selection_if_invalid() is True
    assert created[0].removed_selections == 2


def test_calc_single_timestep_and_statistics(setup):
    controller, created = setup
    controller.calc_single_timestep()
    assert created[0].steps == 1
    stats = controller.get_statistics()
    assert stats.time_step == 11
    assert stats.num_cells == 7


def test_run_and_pause(setup):
    controller, created = setup
    assert controller.is_simulation_running() is False
    controller.run_simulation()
    assert controller.is_simulation_running() is True
    assert wait_until(lambda: created[0].steps > 0)
    controller.pause_simulation()
    assert controller.is_simulation_running() is False


def test_tps_restriction(setup):
    controller, _ = setup
    assert controller.get_tps_restriction() is None
    controller.set_tps_restriction(30)
    assert controller.get_tps_restriction() == 30
    controller.set_tps_restriction(None)
    assert controller.get_tps_restriction() is None


def test_draw_when_paused(setup):
    controller, created = setup
    drawn = controller.try_draw_vector_graphics(
        RealVector2D(0, 0), RealVector2D(10, 10), IntVector2D(20, 20), 2.0
    )
    assert drawn is True
    assert created[0].drawn[0][3] == IntVector2D(20, 20)


def test_selection_shallow_data(setup):
    controller, _ = setup
    assert controller.get_selection_shallow_data() == {"selected": 0}


def test_close_simulation_discards_simulation(setup):
    controller, _ = setup
    controller.close_simulation()
    assert controller._thread is None
    with pytest.raises(RuntimeError):
        controller.get_current_timestep()


def test_close_without_simulation_raises():
    controller = SimulationController(FakeSimulation)
    with pytest.raises(RuntimeError):
        controller.close_simulation()


def test_settings_access_without_simulation_raises():
    controller = SimulationController(FakeSimulation)
    with pytest.raises(RuntimeError):
        controller.get_world_size()


def test_image_registered_before_simulation():
    created = []

    def factory(timestep, settings, gpu_settings):
        sim = FakeSimulation(timestep, settings, gpu_settings)
        created.append(sim)
        return sim

    controller = SimulationController(factory, None)
    controller.register_image_resource(5)
    controller.new_simulation(0, Settings(), {})
    try:
        assert created[0].registered_image == 5
        assert controller.get_current_timestep() == 0
        assert controller.get_gpu_settings() is None
    finally:
        controller.close_simulation()