"""Bridge Spy - live terminal inspector for bridge/RPC call streams."""

from bridgespy.constants.values import APP_VERSION

__version__ = APP_VERSION

__all__ = ["__version__"]
