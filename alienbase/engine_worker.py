"""Worker that drives a simulation backend on a background thread.

The worker owns a simulation object created by a factory. A background loop
advances the simulation while it is running and applies queued asynchronous
jobs. Synchronous calls from other threads first obtain access: while the
simulation is running they ask the loop to pause between time steps.
"""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass, fields
from typing import Any, Callable, Iterator, Optional

from alienbase.vectors import IntVector2D, RealVector2D

FRAME_TIMEOUT = 0.03
MONITOR_UPDATE_INTERVAL = 0.03
ACCESS_TIMEOUT = 5.0

SimulationFactory = Callable[[int, Any, Any], Any]


@dataclass
class MonitorData:
    """Overall statistics of the running simulation."""

    time_step: int = 0
    num_cells: int = 0
    num_particles: int = 0
    num_tokens: int = 0
    total_internal_energy: float = 0.0
    num_created_cells: int = 0
    num_successful_attacks: int = 0
    num_failed_attacks: int = 0
    num_muscle_activities: int = 0


@dataclass
class ApplyForceJob:
    """A force to be applied along a line segment within a radius."""

    start: RealVector2D
    end: RealVector2D
    force: RealVector2D
    radius: float


class EngineWorker:
    """Runs a simulation on a worker thread and serialises access to it.

    ``simulation_factory(timestep, settings, gpu_settings)`` creates the
    simulation backend.
    """

    def __init__(self, simulation_factory: SimulationFactory) -> None:
        self._factory = simulation_factory
        self._simulation: Any = None

        self._cond = threading.Condition()
        self._running = False
        self._shutdown = False
        self._access_requests = 0
        self._access_granted = False

        self._error_lock = threading.Lock()
        self._error_message: Optional[str] = None

        self._parameters_job: Any = None
        self._spots_job: Any = None
        self._gpu_settings_job: Any = None
        self._flow_field_job: Any = None
        self._apply_force_jobs: list[ApplyForceJob] = []

        self._image_to_register: Any = None
        self._cuda_resource: Any = None

        self._tps_restriction = 0
        self._tps = 0.0
        self._timepoint: Optional[float] = None
        self._timesteps_since_timepoint = 0

        self._settings: Any = None
        self._gpu_settings: Any = None

        self._monitor_lock = threading.Lock()
        self._monitor = MonitorData()
        self._last_monitor_update: Optional[float] = None

    # ------------------------------------------------------------------ access

    def _require_simulation(self) -> Any:
        if self._simulation is None:
            raise RuntimeError("no simulation has been created")
        return self._simulation

    def _raise_pending_error(self) -> None:
        with self._error_lock:
            if self._error_message is not None:
                raise RuntimeError(self._error_message)

    @contextmanager
    def _access(self, max_duration: Optional[float] = None) -> Iterator[bool]:
        """Obtain exclusive use of the simulation; yields False on a frame timeout."""
        if not self._running:
            try:
                yield True
            finally:
                with self._cond:
                    self._cond.notify_all()
            return

        with self._cond:
            self._access_requests += 1
            self._cond.notify_all()
            timeout = ACCESS_TIMEOUT if max_duration is None else max_duration
            granted = self._cond.wait_for(lambda: self._access_granted, timeout)
        try:
            if max_duration is None:
                if not granted:
                    self._raise_pending_error()
                    raise RuntimeError("GPU Timeout")
            else:
                self._raise_pending_error()
            yield granted
        finally:
            with self._cond:
                self._access_requests -= 1
                self._cond.notify_all()

    def _yield_to_accessors(self) -> None:
        """Let waiting callers use the simulation; the condition lock must be held."""
        while self._access_requests > 0:
            self._access_granted = True
            self._cond.notify_all()
            self._cond.wait()
        self._access_granted = False

    # -------------------------------------------------------------- lifecycle

    def new_simulation(self, timestep: int, settings: Any, gpu_settings: Any) -> None:
        """Create a fresh simulation backend."""
        self._settings = settings
        self._gpu_settings = gpu_settings
        self._simulation = self._factory(timestep, settings, gpu_settings)
        if self._image_to_register is not None:
            self._cuda_resource = self._simulation.register_image_resource(self._image_to_register)
            self._image_to_register = None

    def clear(self) -> None:
        with self._access():
            self._require_simulation().clear()

    def register_image_resource(self, image: Any) -> None:
        """Register the render target; deferred until a simulation exists."""
        if self._simulation is None:
            self._image_to_register = image
            return
        with self._access():
            self._cuda_resource = self._simulation.register_image_resource(image)

    def try_draw_vector_graphics(
        self,
        rect_upper_left: RealVector2D,
        rect_lower_right: RealVector2D,
        image_size: IntVector2D,
        zoom: float,
    ) -> bool:
        """Draw the given world section unless the simulation is busy for too long.

        Returns whether drawing took place.
        """
        with self._access(FRAME_TIMEOUT) as granted:
            if not granted:
                return False
            self._require_simulation().draw_vector_graphics(
                rect_upper_left, rect_lower_right, self._cuda_resource, image_size, zoom
            )
            return True

    def get_monitor_data(self) -> MonitorData:
        with self._monitor_lock:
            return MonitorData(**{f.name: getattr(self._monitor, f.name) for f in fields(MonitorData)})

    def calc_single_timestep(self) -> None:
        with self._access():
            self._require_simulation().calc_cuda_timestep()
            self._update_monitor_data()

    def begin_shutdown(self) -> None:
        """Ask the worker loop to end; the caller should then join its thread."""
        with self._cond:
            self._shutdown = True
            self._cond.notify_all()

    def end_shutdown(self) -> None:
        with self._cond:
            self._running = False
            self._shutdown = False
        self._simulation = None

    # ------------------------------------------------------------ properties

    def get_tps_restriction(self) -> int:
        return self._tps_restriction

    def set_tps_restriction(self, value: int) -> None:
        """Limit time steps per second; 0 means no restriction."""
        with self._cond:
            self._tps_restriction = value
            self._cond.notify_all()

    def get_tps(self) -> float:
        return self._tps

    def get_current_timestep(self) -> int:
        return self._require_simulation().get_current_timestep()

    def set_current_timestep(self, value: int) -> None:
        with self._access():
            self._require_simulation().set_current_timestep(value)

    # ------------------------------------------------------------ async jobs

    def set_simulation_parameters_async(self, parameters: Any) -> None:
        with self._cond:
            self._parameters_job = parameters
            self._cond.notify_all()

    def set_simulation_parameters_spots_async(self, spots: Any) -> None:
        with self._cond:
            self._spots_job = spots
            self._cond.notify_all()

    def set_gpu_settings_async(self, gpu_settings: Any) -> None:
        with self._cond:
            self._gpu_settings_job = gpu_settings
            self._cond.notify_all()

    def set_flow_field_settings_async(self, flow_field_settings: Any) -> None:
        with self._cond:
            self._flow_field_job = flow_field_settings
            self._cond.notify_all()

    def apply_force_async(
        self, start: RealVector2D, end: RealVector2D, force: RealVector2D, radius: float
    ) -> None:
        with self._cond:
            self._apply_force_jobs.append(ApplyForceJob(start, end, force, radius))
            self._cond.notify_all()

    # ------------------------------------------------------------- selection

    def switch_selection(self, pos: RealVector2D, radius: float) -> None:
        with self._access():
            self._require_simulation().switch_selection(pos, radius)

    def get_selection_shallow_data(self) -> Any:
        with self._access():
            return self._require_simulation().get_selection_shallow_data()

    def set_selection(self, start_pos: RealVector2D, end_pos: RealVector2D) -> None:
        with self._access():
            self._require_simulation().set_selection(start_pos, end_pos)

    def shallow_update_selection(self, update_data: Any) -> None:
        with self._access():
            self._require_simulation().shallow_update_selection(update_data)

    def remove_selection(self) -> None:
        with self._access():
            self._require_simulation().remove_selection()

    # ------------------------------------------------------------ worker loop

    def run_thread_loop(self) -> None:
        """Body of the worker thread; returns after ``begin_shutdown``.

        An exception raised by the simulation ends the loop and is reported to
        later callers that wait for access.
        """
        try:
            start_time: Optional[float] = None
            while True:
                with self._cond:
                    if not self._running:
                        self._tps = 0.0
                        self._cond.wait_for(
                            lambda: self._running
                            or self._shutdown
                            or self._access_requests > 0
                            or self._has_pending_jobs()
                        )
                    if self._shutdown:
                        return
                    self._yield_to_accessors()
                    running = self._running

                if running:
                    if start_time is not None and self._tps_restriction > 0:
                        if not self._throttle(start_time):
                            return
                    self._measure_tps()
                    start_time = time.monotonic()
                    self._require_simulation().calc_cuda_timestep()
                    self._update_monitor_data()
                    self._timesteps_since_timepoint += 1
                self._process_jobs()
        except Exception as error:  # reported to waiting callers
            with self._error_lock:
                self._error_message = str(error)

    def run_simulation(self) -> None:
        with self._cond:
            self._running = True
            self._cond.notify_all()

    def pause_simulation(self) -> None:
        with self._cond:
            self._running = False
            self._cond.notify_all()

    def is_simulation_running(self) -> bool:
        return self._running

    # -------------------------------------------------------------- internals

    def _throttle(self, start_time: float) -> bool:
        """Wait until the time step budget is used up; False on shutdown."""
        with self._cond:
            while True:
                if self._shutdown:
                    return False
                if self._access_requests > 0:
                    self._yield_to_accessors()
                    continue
                restriction = self._tps_restriction
                desired = 1.0 / restriction if restriction > 0 else 0.0
                remaining = desired - (time.monotonic() - start_time)
                if remaining <= 0:
                    return True
                self._cond.wait(remaining)

    def _measure_tps(self) -> None:
        now = time.monotonic()
        if self._timepoint is None:
            self._timepoint = now
            return
        duration = int((now - self._timepoint) * 1000)
        if duration > 199:
            self._timepoint = now
            if duration < 350:
                self._tps = float(self._timesteps_since_timepoint) * 5 * 200 / duration
            else:
                self._tps = 1000.0 / duration
            self._timesteps_since_timepoint = 0

    def _update_monitor_data(self) -> None:
        now = time.monotonic()
        if self._last_monitor_update is not None and now - self._last_monitor_update <= MONITOR_UPDATE_INTERVAL:
            return
        data = self._require_simulation().get_monitor_data()
        snapshot = MonitorData(**{f.name: getattr(data, f.name) for f in fields(MonitorData)})
        with self._monitor_lock:
            self._monitor = snapshot
        self._last_monitor_update = now

    def _has_pending_jobs(self) -> bool:
        return (
            self._parameters_job is not None
            or self._spots_job is not None
            or self._gpu_settings_job is not None
            or self._flow_field_job is not None
            or bool(self._apply_force_jobs)
        )

    def _process_jobs(self) -> None:
        with self._cond:
            if not self._has_pending_jobs():
                return
            parameters, self._parameters_job = self._parameters_job, None
            spots, self._spots_job = self._spots_job, None
            gpu_settings, self._gpu_settings_job = self._gpu_settings_job, None
            flow_field, self._flow_field_job = self._flow_field_job, None
            forces, self._apply_force_jobs = self._apply_force_jobs, []

        simulation = self._require_simulation()
        if parameters is not None:
            simulation.set_simulation_parameters(parameters)
        if spots is not None:
            simulation.set_simulation_parameters_spots(spots)
        if gpu_settings is not None:
            simulation.set_gpu_constants(gpu_settings)
        if flow_field is not None:
            simulation.set_flow_field_settings(flow_field)
        for job in forces:
            simulation.apply_force(job.start, job.end, job.force, job.radius, False)