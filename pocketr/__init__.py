"""An LR35902 (Game Boy) CPU core: flags, registers, memory bus and CPU."""

__version__ = "0.1.0"
__all__ = ["cpu", "flags", "registers"]