from enum import StrEnum

from coolify_mcp.core.catalog import DATABASE_TYPES
from coolify_mcp.core.handlers.base import Envelope, OperationRequest, ResourceHandler, Route


class DatabaseOperation(StrEnum):
    LIST = "list"
    GET = "get"
    UPDATE = "update"
    DELETE = "delete"
    CREATE_POSTGRESQL = "create_postgresql"
    CREATE_CLICKHOUSE = "create_clickhouse"
    CREATE_DRAGONFLY = "create_dragonfly"
    CREATE_REDIS = "create_redis"
    CREATE_KEYDB = "create_keydb"
    CREATE_MARIADB = "create_mariadb"
    CREATE_MYSQL = "create_mysql"
    CREATE_MONGODB = "create_mongodb"
    START = "start"
    STOP = "stop"
    RESTART = "restart"
    GET_DATABASE_TYPES = "get_database_types"


_UUID = ("uuid",)

ROUTES: dict[str, Route] = {
    DatabaseOperation.LIST: Route("list_databases"),
    DatabaseOperation.GET: Route("get_database_by_uuid", _UUID),
    DatabaseOperation.UPDATE: Route("update_database_by_uuid", _UUID, body=True),
    DatabaseOperation.DELETE: Route("delete_database_by_uuid", _UUID),
    DatabaseOperation.CREATE_POSTGRESQL: Route("create_database_postgresql", body=True),
    DatabaseOperation.CREATE_CLICKHOUSE: Route("create_database_clickhouse", body=True),
    DatabaseOperation.CREATE_DRAGONFLY: Route("create_database_dragonfly", body=True),
    DatabaseOperation.CREATE_REDIS: Route("create_database_redis", body=True),
    DatabaseOperation.CREATE_KEYDB: Route("create_database_keydb", body=True),
    DatabaseOperation.CREATE_MARIADB: Route("create_database_mariadb", body=True),
    DatabaseOperation.CREATE_MYSQL: Route("create_database_mysql", body=True),
    DatabaseOperation.CREATE_MONGODB: Route("create_database_mongodb", body=True),
    DatabaseOperation.START: Route("start_database_by_uuid", _UUID),
    DatabaseOperation.STOP: Route("stop_database_by_uuid", _UUID),
    DatabaseOperation.RESTART: Route("restart_database_by_uuid", _UUID),
}


class DatabasesHandler(ResourceHandler):
    resource = "databases"
    operations = DatabaseOperation
    routes = ROUTES

    async def handle_local(self, operation: StrEnum, request: OperationRequest) -> Envelope:
        if operation is DatabaseOperation.GET_DATABASE_TYPES:
            return {
                "data": {
                    "database_types": list(DATABASE_TYPES),
                    "count": len(DATABASE_TYPES),
                    "description": "All available database types supported by Coolify",
                }
            }
        return await super().handle_local(operation, request)
