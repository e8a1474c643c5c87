"""CinePrompt: cinematic scene descriptions compiled into image-model prompts."""

from cineprompt.models.scene import SceneState
from cineprompt.prompt.compiler import compile_prompt
from cineprompt.randomize import randomize_scene
from cineprompt.resolver import apply_camera_change, apply_director_change, compute_conflicts

__version__ = "0.1.0"

__all__ = [
    "SceneState",
    "__version__",
    "apply_camera_change",
    "apply_director_change",
    "compile_prompt",
    "compute_conflicts",
    "randomize_scene",
]
