"""Connection registry for named ArangoDB endpoints."""

from ._connection import Connection
from ._settings import ArangoSettings


class ConnectionRegistry:
    """Registry of connections keyed by alias."""

    def __init__(self):
        self._connections: dict[str, Connection] = {}

    def add(self, connection: Connection) -> None:
        """Register a connection under its alias, replacing any previous one."""
        self._connections[connection.alias] = connection

    def register(
        self,
        alias: str,
        hostname: str,
        port: int,
        is_secured: bool = False,
        database_name: str | None = None,
        username: str = "",
        password: str = "",
        use_web_proxy: bool = False,
    ) -> Connection:
        """Create and register a connection."""
        connection = Connection(
            alias,
            hostname,
            port,
            is_secured=is_secured,
            database_name=database_name,
            username=username,
            password=password,
            use_web_proxy=use_web_proxy,
        )
        self.add(connection)
        return connection

    def register_from_settings(self, settings: ArangoSettings) -> Connection:
        connection = Connection.from_settings(settings)
        self.add(connection)
        return connection

    def get(self, alias: str) -> Connection:
        """Get a connection by alias."""
        if alias not in self._connections:
            raise KeyError(f"Unknown connection: '{alias}'")
        return self._connections[alias]

    def remove(self, alias: str) -> bool:
        """Remove a connection. Returns False if the alias was not registered."""
        return self._connections.pop(alias, None) is not None

    def __contains__(self, alias: object) -> bool:
        return alias in self._connections

    def list_connections(self) -> list[str]:
        """List registered aliases."""
        return list(self._connections.keys())
