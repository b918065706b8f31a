from dataclasses import dataclass
from os import environ
from typing import cast

from course_studio.infrastructure.log.main import LogFormat, LoggingLevel

LOGGING_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("console", "json")


@dataclass
class MissingDatabaseConfigError(ValueError):

    @property
    def title(self) -> str:
        return "Required MongoDB environment variables are missing"


@dataclass
class InvalidLoggingLevelError(ValueError):
    level: str

    @property
    def title(self) -> str:
        return f"Unknown LOG_LEVEL '{self.level}'"


@dataclass
class InvalidLogFormatError(ValueError):
    log_format: str

    @property
    def title(self) -> str:
        return f"Unknown LOG_FORMAT '{self.log_format}'"


@dataclass(frozen=True)
class MongoDBConfig:
    host: str
    port: int
    user: str
    password: str
    db_name: str
    collection_name: str

    @property
    def uri(self) -> str:
        return (
            f"mongodb://{self.user}:{self.password}@{self.host}"
            f":{self.port}/"
        )


@dataclass(frozen=True)
class AuthConfig:
    user_id_header: str


@dataclass(frozen=True)
class LoggingConfig:
    level: LoggingLevel
    log_format: LogFormat = "console"


def load_database_config() -> MongoDBConfig:
    host = environ.get("MONGO_HOST")
    port = environ.get("MONGO_PORT")
    user = environ.get("MONGO_INITDB_ROOT_USERNAME")
    password = environ.get("MONGO_INITDB_ROOT_PASSWORD")
    db_name = environ.get("MONGO_DB_NAME")
    collection_name = environ.get("MONGO_COLLECTION_NAME", "courses")

    if (
            host is None
            or port is None
            or user is None
            or password is None
            or db_name is None
    ):
        raise MissingDatabaseConfigError

    return MongoDBConfig(
        host=host,
        port=int(port),
        user=user,
        password=password,
        db_name=db_name,
        collection_name=collection_name,
    )


def load_auth_config() -> AuthConfig:
    return AuthConfig(
        user_id_header=environ.get("AUTH_USER_ID_HEADER", "X-User-Id"),
    )


def load_logging_config() -> LoggingConfig:
    level = environ.get("LOG_LEVEL", "INFO").upper()

    if level not in LOGGING_LEVELS:
        raise InvalidLoggingLevelError(level=level)

    log_format = environ.get("LOG_FORMAT", "console").lower()
    if log_format not in LOG_FORMATS:
        raise InvalidLogFormatError(log_format=log_format)

    return LoggingConfig(
        level=cast(LoggingLevel, level),
        log_format=cast(LogFormat, log_format),
    )


@dataclass(frozen=True)
class Config:
    database: MongoDBConfig
    auth: AuthConfig
    logging: LoggingConfig


def load_settings() -> Config:
    return Config(
        database=load_database_config(),
        auth=load_auth_config(),
        logging=load_logging_config(),
    )
