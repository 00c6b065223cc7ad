from typing import Any


# Type aliases for Python dictionaries
type LambdaEvent = dict[str, Any]
type LambdaContext = Any
type LambdaResponse = dict[str, Any]
type LambdaConfiguration = dict[str, Any]
type AppConfig = dict[str, Any]
type HttpHeaders = dict[str, str]

# Raw redirect data as received from clients or stored in a data store
type RedirectPayload = dict[str, Any]
type RedirectDocument = dict[str, dict[str, str]]
