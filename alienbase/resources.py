"""Locations of resource files used by the application."""

PROGRAM_VERSION = "3 preview"

BASE_PATH = "Resources/"


def resource_path(name: str) -> str:
    """Path of the resource file ``name``."""
    return BASE_PATH + name


AUTOSAVE_FILE = resource_path("autosave.sim")
LOG_FILENAME = resource_path("log.txt")
SETTINGS_FILENAME = resource_path("settings.json")

SIMULATION_FRAGMENT_SHADER = resource_path("shader.fs")
SIMULATION_VERTEX_SHADER = resource_path("shader.vs")

NAVIGATION_ON_FILENAME = resource_path("navigation on.png")
NAVIGATION_OFF_FILENAME = resource_path("navigation off.png")
ACTION_ON_FILENAME = resource_path("action on.png")
ACTION_OFF_FILENAME = resource_path("action off.png")

RUN_FILENAME = resource_path("run.png")
PAUSE_FILENAME = resource_path("pause.png")
STEP_BACKWARD_FILENAME = resource_path("step backward.png")
STEP_FORWARD_FILENAME = resource_path("step forward.png")
SNAPSHOT_FILENAME = resource_path("snapshot.png")
RESTORE_FILENAME = resource_path("restore.png")

ZOOM_IN_FILENAME = resource_path("zoom in.png")
ZOOM_OUT_FILENAME = resource_path("zoom out.png")
RESIZE_FILENAME = resource_path("resize.png")

LOGO_FILENAME = resource_path("logo.png")