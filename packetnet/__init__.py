"""Header;data packets exchanged by TCP and UDP clients and servers, with a menu client."""

__version__ = "0.1.0"
__all__ = ["packet", "client", "server", "menu_client"]