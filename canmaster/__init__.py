"""CANopen master building blocks: data model, object dictionary store, NMT frames, driver and signals."""

__version__ = "0.1.0"

__all__ = ["dictionary", "driver", "nmt", "object_store", "parameters", "signals"]