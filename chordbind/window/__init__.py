"""Window backend input adapters."""

from chordbind.window.glfw_codes import GlfwInputAdapter, keyboard_atom_for_glfw_key, mouse_click_for_glfw_button

__all__ = ["GlfwInputAdapter", "keyboard_atom_for_glfw_key", "mouse_click_for_glfw_button"]
