"""Front end to a simulation running on a background worker thread."""

from __future__ import annotations

import copy
import threading
from typing import Any, Optional

from alienbase.engine_worker import EngineWorker, MonitorData, SimulationFactory
from alienbase.vectors import IntVector2D, RealVector2D


class SimulationController:
    """Owns an engine worker and its thread and keeps the current and original settings.

    ``settings`` objects are expected to provide ``simulation_parameters``,
    ``simulation_parameters_spots`` (with a ``spots`` sequence),
    ``flow_field_settings`` (with a ``centers`` sequence) and
    ``general_settings`` (with ``world_size_x`` and ``world_size_y``).
    """

    def __init__(self, simulation_factory: SimulationFactory, gpu_settings: Any = None) -> None:
        self._worker = EngineWorker(simulation_factory)
        self._thread: Optional[threading.Thread] = None
        self._is_selection_invalid = False
        self._settings: Any = None
        self._orig_settings: Any = None
        self._gpu_settings: Any = gpu_settings
        self._orig_gpu_settings: Any = copy.deepcopy(gpu_settings)
        self._symbol_map: Any = None

    # -------------------------------------------------------------- lifecycle

    def new_simulation(self, timestep: int, settings: Any, symbol_map: Any) -> None:
        """Create a simulation from ``settings`` and start its worker thread."""
        self._settings = copy.deepcopy(settings)
        self._orig_settings = copy.deepcopy(settings)
        self._symbol_map = copy.deepcopy(symbol_map)
        self._worker.new_simulation(timestep, copy.deepcopy(settings), self._gpu_settings)
        self._orig_gpu_settings = copy.deepcopy(self._gpu_settings)

        self._thread = threading.Thread(
            target=self._worker.run_thread_loop, name="simulation-worker", daemon=True
        )
        self._thread.start()
        self._is_selection_invalid = True

    def clear(self) -> None:
        self._worker.clear()
        self._is_selection_invalid = True

    def register_image_resource(self, image: Any) -> None:
        self._worker.register_image_resource(image)

    def try_draw_vector_graphics(
        self,
        rect_upper_left: RealVector2D,
        rect_lower_right: RealVector2D,
        image_size: IntVector2D,
        zoom: float,
    ) -> bool:
        """Draw a section of the world; skipped if the simulation stays busy too long.

        Returns whether drawing took place.
        """
        return self._worker.try_draw_vector_graphics(rect_upper_left, rect_lower_right, image_size, zoom)

    def calc_single_timestep(self) -> None:
        self._worker.calc_single_timestep()
        self._is_selection_invalid = True

    def run_simulation(self) -> None:
        self._worker.run_simulation()
        self._is_selection_invalid = True

    def pause_simulation(self) -> None:
        self._worker.pause_simulation()

    def is_simulation_running(self) -> bool:
        return self._worker.is_simulation_running()

    def close_simulation(self) -> None:
        """Stop the worker thread and discard the simulation."""
        if self._thread is None:
            raise RuntimeError("no simulation is open")
        self._worker.begin_shutdown()
        self._thread.join()
        self._thread = None
        self._worker.end_shutdown()
        self._is_selection_invalid = True

    # -------------------------------------------------------------- timestep

    def get_current_timestep(self) -> int:
        return self._worker.get_current_timestep()

    def set_current_timestep(self, value: int) -> None:
        self._worker.set_current_timestep(value)

    # -------------------------------------------------------------- settings

    def _require_settings(self) -> Any:
        if self._settings is None:
            raise RuntimeError("no simulation has been created")
        return self._settings

    def _require_orig_settings(self) -> Any:
        if self._orig_settings is None:
            raise RuntimeError("no simulation has been created")
        return self._orig_settings

    def get_simulation_parameters(self) -> Any:
        return copy.deepcopy(self._require_settings().simulation_parameters)

    def get_original_simulation_parameters(self) -> Any:
        return copy.deepcopy(self._require_orig_settings().simulation_parameters)

    def set_simulation_parameters_async(self, parameters: Any) -> None:
        self._require_settings().simulation_parameters = copy.deepcopy(parameters)
        self._worker.set_simulation_parameters_async(copy.deepcopy(parameters))

    def get_simulation_parameters_spots(self) -> Any:
        return copy.deepcopy(self._require_settings().simulation_parameters_spots)

    def get_original_simulation_parameters_spots(self) -> Any:
        return copy.deepcopy(self._require_orig_settings().simulation_parameters_spots)

    def set_original_simulation_parameters_spot(self, value: Any, index: int) -> None:
        self._require_orig_settings().simulation_parameters_spots.spots[index] = copy.deepcopy(value)

    def set_simulation_parameters_spots_async(self, value: Any) -> None:
        self._require_settings().simulation_parameters_spots = copy.deepcopy(value)
        self._worker.set_simulation_parameters_spots_async(copy.deepcopy(value))

    def get_gpu_settings(self) -> Any:
        return copy.deepcopy(self._gpu_settings)

    def get_original_gpu_settings(self) -> Any:
        return copy.deepcopy(self._orig_gpu_settings)

    def set_gpu_settings_async(self, gpu_settings: Any) -> None:
        self._gpu_settings = copy.deepcopy(gpu_settings)
        self._worker.set_gpu_settings_async(copy.deepcopy(gpu_settings))

    def get_flow_field_settings(self) -> Any:
        return copy.deepcopy(self._require_settings().flow_field_settings)

    def get_original_flow_field_settings(self) -> Any:
        return copy.deepcopy(self._require_orig_settings().flow_field_settings)

    def set_original_flow_field_center(self, value: Any, index: int) -> None:
        self._require_orig_settings().flow_field_settings.centers[index] = copy.deepcopy(value)

    def set_flow_field_settings_async(self, flow_field_settings: Any) -> None:
        self._require_settings().flow_field_settings = copy.deepcopy(flow_field_settings)
        self._worker.set_flow_field_settings_async(copy.deepcopy(flow_field_settings))

    def apply_force_async(
        self, start: RealVector2D, end: RealVector2D, force: RealVector2D, radius: float
    ) -> None:
        self._worker.apply_force_async(start, end, force, radius)

    # ------------------------------------------------------------- selection

    def switch_selection(self, pos: RealVector2D, radius: float) -> None:
        self._worker.switch_selection(pos, radius)

    def get_selection_shallow_data(self) -> Any:
        return self._worker.get_selection_shallow_data()

    def shallow_update_selection(self, update_data: Any) -> None:
        self._worker.shallow_update_selection(update_data)

    def set_selection(self, start_pos: RealVector2D, end_pos: RealVector2D) -> None:
        self._worker.set_selection(start_pos, end_pos)

    def remove_selection(self) -> None:
        self._worker.remove_selection()

    def remove_selection_if_invalid(self) -> bool:
        """Remove the selection if it may be stale; return whether it was removed."""
        result = self._is_selection_invalid
        self._is_selection_invalid = False
        if result:
            self.remove_selection()
        return result

    # ------------------------------------------------------------ inspection

    def get_general_settings(self) -> Any:
        return copy.deepcopy(self._require_settings().general_settings)

    def get_world_size(self) -> IntVector2D:
        general = self._require_settings().general_settings
        return IntVector2D(general.world_size_x, general.world_size_y)

    def get_settings(self) -> Any:
        return copy.deepcopy(self._require_settings())

    def get_symbol_map(self) -> Any:
        return copy.deepcopy(self._symbol_map)

    def get_statistics(self) -> MonitorData:
        return self._worker.get_monitor_data()

    def get_tps_restriction(self) -> Optional[int]:
        """Maximum time steps per second, or None when unrestricted."""
        result = self._worker.get_tps_restriction()
        return result if result != 0 else None

    def set_tps_restriction(self, value: Optional[int]) -> None:
        self._worker.set_tps_restriction(value if value else 0)

    def get_tps(self) -> float:
        return self._worker.get_tps()