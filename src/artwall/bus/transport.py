"""
Session bus transport.

Thin wrapper around dbus-python that applies a timeout to every call and
translates library exceptions into the artwall error hierarchy.
"""

import logging
from typing import Any, List

import dbus

from ..config.dataclasses import BusConfig
from ..constants import (
    DBUS_SERVICE,
    DBUS_PATH,
    DBUS_INTERFACE,
    DBUS_PROPERTIES_INTERFACE,
)
from ..exceptions import BusCallError, BusConnectionError, BusTimeoutError


logger = logging.getLogger(__name__)

TIMEOUT_ERROR_NAMES = {
    "org.freedesktop.DBus.Error.NoReply",
    "org.freedesktop.DBus.Error.Timeout",
    "org.freedesktop.DBus.Error.TimedOut",
}


def _translate(error: "dbus.exceptions.DBusException", what: str) -> BusCallError:
    """Map a DBusException to BusTimeoutError or BusCallError."""
    name = error.get_dbus_name()
    if name in TIMEOUT_ERROR_NAMES:
        return BusTimeoutError(f"{what} timed out: {error}")
    return BusCallError(f"{what} failed ({name}): {error}")


class SessionBus:
    """
    Blocking session bus client.
    
    Usage:
        bus = SessionBus.connect(config.bus)
        names = bus.list_names()
        bus.close()
    """
    
    def __init__(self, config: BusConfig, connection: Any) -> None:
        self.config = config
        self._connection = connection
    
    @classmethod
    def connect(cls, config: BusConfig) -> 'SessionBus':
        """
        Open a private connection to the session bus.
        
        Raises:
            BusConnectionError: If the bus cannot be reached
        """
        try:
            connection = dbus.SessionBus(private=True)
        except dbus.exceptions.DBusException as e:
            raise BusConnectionError(f"Failed to connect to session bus: {e}")
        logger.debug("Connected to session bus")
        return cls(config, connection)
    
    @property
    def timeout(self) -> float:
        """Per-call timeout in seconds."""
        return self.config.call_timeout
    
    def close(self) -> None:
        """Close the underlying connection."""
        try:
            self._connection.close()
        except dbus.exceptions.DBusException as e:
            logger.debug(f"Error closing session bus: {e}")
    
    def list_names(self) -> List[str]:
        """
        List names currently owned on the bus.
        
        Raises:
            BusCallError: If the bus daemon does not answer
        """
        names = self.call_method(DBUS_SERVICE, DBUS_PATH, DBUS_INTERFACE, "ListNames")
        return [str(name) for name in names]
    
    def get_property(self, service: str, path: str, interface: str, name: str) -> Any:
        """
        Read a property through org.freedesktop.DBus.Properties.Get.
        
        Returns:
            The property value as dbus-python types (subclasses of dict/str/...)
            
        Raises:
            BusCallError: If the service is gone or rejects the read
        """
        return self.call_method(
            service, path, DBUS_PROPERTIES_INTERFACE, "Get", interface, name
        )
    
    def call_method(self, service: str, path: str, interface: str, method: str,
                    *args: Any) -> Any:
        """
        Invoke a method on a remote object and wait for the reply.
        
        Raises:
            BusTimeoutError: If no reply arrives within the timeout
            BusCallError: On any other D-Bus error
        """
        what = f"{interface}.{method} on {service}{path}"
        logger.debug(f"Calling {what}")
        try:
            proxy = self._get_object(service, path)
            return proxy.get_dbus_method(method, interface)(*args, timeout=self.timeout)
        except dbus.exceptions.DBusException as e:
            raise _translate(e, what)
    
    def _get_object(self, service: str, path: str) -> Any:
        return self._connection.get_object(service, path, introspect=False)
