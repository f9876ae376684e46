# alienbase

Building blocks for an artificial-life simulation engine. The package has no
dependencies outside the standard library.

## Modules

- `alienbase.vectors`: `IntVector2D`, `RealVector2D` and `RealRect` dataclasses.
  `RealVector2D` supports `+`, `-`, `*` (by a number), `/` (by a number) and their
  in-place forms. `IntVector2D` supports `-=` and prints as `(x, y)`.
- `alienbase.vecmath`: `length(v)` and `angle_of_vector(v)`. The angle is in degrees,
  measured clockwise from (0, -1), and lies in [0, 360). For the zero vector it raises
  `ZeroDivisionError`. The module also defines the constants `PI`, `DEG_TO_RAD` and
  `RAD_TO_DEG`.
- `alienbase.physics`: `rotate_quarter_counter_clockwise(v)` and
  `tangential_velocity(position_from_center, vel, angular_vel)`. The angular velocity
  is given in degrees.
- `alienbase.string_formatter`: `format_int(n)` groups digits in threes, so `1234567`
  gives `"1,234,567"`. Negative numbers raise `ValueError`. `format_float(v, decimals)`
  groups the integer part the same way and appends exactly `decimals` truncated
  digits. It always writes the decimal point: `format_float(-1234.5, 2)` gives
  `"-1,234.50"`.
- `alienbase.tracker`:
  - `ValueTracker(value, old_value)` is truthy when `value` is set and differs from
    `old_value`. If `old_value` is omitted, it equals `value`.
  - `StateTracker(value, state)` records a `TrackerState`: `ADDED` (the default),
    `MODIFIED` or `DELETED`. It has the methods `mark_added()`, `mark_modified()` and
    `mark_deleted()`, which can be chained. It has the properties `is_added`,
    `is_modified` and `is_deleted`.
- `alienbase.json_parser`: `encode_decode(tree, value, default, node, task)` works on a
  nested dict and a dotted node path.
  - With `ParserTask.ENCODE` it stores `value` as text and returns it. Booleans are
    stored as `"true"`/`"false"` and floats with six decimals.
  - With `ParserTask.DECODE` it returns the stored value converted to the type of
    `default`. It returns `default` when the node is missing or the value cannot be
    converted.
- `alienbase.exceptions`: `BugReportException`, `SpecificCudaException`,
  `SystemRequirementNotMetException` and `ParseErrorException`, all subclasses of
  `RuntimeError`. `check(expression)` raises `BugReportException("check failed")`
  when the expression is falsy.
- `alienbase.logging_service`: `LoggingService` prefixes each message with the local
  time (`%Y-%m-%d %H-%M-%S: `). It then calls every registered callback with
  `(priority, message)`, where the priority is a `Priority`. `unregister_callback`
  removes every registration of a callback.
- `alienbase.service_locator`: `ServiceLocator.get_instance()` returns the shared
  registry. `register_service(service_type, service)` stores a service under its type.
  `get_service(service_type)` returns the stored service, or `None` if there is none.
- `alienbase.base_services`: `register_base_services()` registers a shared
  `LoggingService` with the global locator and returns it.
- `alienbase.number_generator`:
  - `NumberGenerator(size, seed)` precomputes a table of random 31-bit integers and
    cycles through it. `get_instance()` returns a shared generator with the default
    table size.
  - `get_random_int()` returns any value from the table. `get_random_int(n)` returns a
    value in `[0, n)`, and `get_random_int(a, b)` one in `[a, b]`.
  - `get_large_random_int(n)` returns a value in `[0, n]`.
  - `get_random_real()` returns a value in `[0, 1)`. `get_random_real(low, high)`
    returns a value in `[low, high]` at a resolution of 0.001.
  - `get_id()` returns increasing ids with bit 48 set.
- `alienbase.access_cache`: `AccessDataCache(string_bytes_size)` pools
  `DataAccessBuffer` objects for a given `ArraySizes`. `get_data(sizes)` returns a
  cleared buffer, reusing a released one when possible; when the sizes change, all
  cached buffers are dropped. `release_data(buffer)` returns a buffer to the pool and
  ignores buffers the cache does not know.
- `alienbase.resources`: `resource_path(name)` returns `"Resources/" + name`. The module
  also holds constants for the application's resource files, such as `AUTOSAVE_FILE`,
  `LOG_FILENAME`, `SETTINGS_FILENAME` and the icon file names, and `PROGRAM_VERSION`.
- `alienbase.engine_worker`: `EngineWorker(simulation_factory)` holds a simulation
  object created by `simulation_factory(timestep, settings, gpu_settings)`.
  - `run_thread_loop()` is meant to run on a thread. It advances the simulation while
    it is running and applies queued asynchronous jobs: parameters, spots, GPU
    settings, flow field settings and forces.
  - It honours a time-steps-per-second limit (`set_tps_restriction`, 0 for none) and
    measures the rate (`get_tps`).
  - Synchronous calls wait for the loop to pause between steps. They raise
    `RuntimeError("GPU Timeout")` after 5 seconds.
  - `try_draw_vector_graphics` waits at most 30 ms and returns whether it drew.
  - `get_monitor_data()` returns a `MonitorData` snapshot.
- `alienbase.simulation_controller`: `SimulationController(simulation_factory, gpu_settings)`
  is the front end to an `EngineWorker`.
  - `new_simulation` starts the worker thread and `close_simulation` stops it.
  - The controller keeps the current and the original settings.
  - `remove_selection_if_invalid()` removes the selection after a change that may have
    made it stale, and returns whether it did.
  - `get_tps_restriction()` returns `None` when the rate is unrestricted.

## The simulation object

The worker and the controller compute nothing themselves. The object returned by
`simulation_factory` must provide these methods:

- `calc_cuda_timestep()`
- `get_current_timestep()` and `set_current_timestep(value)`
- `get_monitor_data()`, returning an object with the fields of `MonitorData`
- `clear()`
- `register_image_resource(image)` and
  `draw_vector_graphics(upper_left, lower_right, resource, image_size, zoom)`
- `set_simulation_parameters`, `set_simulation_parameters_spots`, `set_gpu_constants`
  and `set_flow_field_settings`
- `apply_force(start, end, force, radius, flag)`
- `switch_selection`, `get_selection_shallow_data`, `set_selection`,
  `shallow_update_selection` and `remove_selection`

The `settings` passed to `SimulationController.new_simulation` must provide these
attributes:

- `simulation_parameters`
- `simulation_parameters_spots`, with a `spots` sequence
- `flow_field_settings`, with a `centers` sequence
- `general_settings`, with `world_size_x` and `world_size_y`

## What it does not do

The package contains no simulation kernel, no GPU backend and no renderer. It also
has no graphical interface, no command-line program and no reading or writing of
simulation files. Those parts come from the caller through `simulation_factory`.

## Installing

```
pip install .
```

## Example

```python
from alienbase.vectors import RealVector2D
from alienbase.vecmath import angle_of_vector
from alienbase.string_formatter import format_int, format_float
from alienbase.logging_service import LoggingService, Priority

print(angle_of_vector(RealVector2D(1.0, 0.0)))  # 90.0
print(format_int(1234567))                      # 1,234,567
print(format_float(-1234.5, 2))                 # -1,234.50

service = LoggingService()
service.register_callback(lambda priority, message: print(priority, message))
service.log_message(Priority.IMPORTANT, "simulation started")
```

## Running the tests

```
pip install .[test]
pytest
```