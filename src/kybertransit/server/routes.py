"""API endpoint path templates and route names for the transit server."""

# POST: Create a new key pair
ROUTE_CREATE_KEY = "/transit/keys/{name}"
# POST: Seal plaintext under a named key
ROUTE_ENCRYPT = "/transit/encrypt/{name}"
# POST: Unseal a capsule/encdata pair under a named key
ROUTE_DECRYPT = "/transit/decrypt/{name}"
# GET: Liveness check
ROUTE_HEALTH = "/health"

# Route names, for URL building via app.url_path_for
ROUTE_NAME_CREATE_KEY = "createKey"
ROUTE_NAME_ENCRYPT = "encrypt"
ROUTE_NAME_DECRYPT = "decrypt"
ROUTE_NAME_HEALTH = "health"
