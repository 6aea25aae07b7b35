"""Selection/view controller for Bridge Spy."""

from bridgespy.controllers.view.controller import ViewController

__all__ = ["ViewController"]
