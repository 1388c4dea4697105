from .wiring import RegistrationManifest, WiringBuilder, WiringConfig

__all__ = ["RegistrationManifest", "WiringBuilder", "WiringConfig"]
