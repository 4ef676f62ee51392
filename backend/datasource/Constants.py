"""
Constants for the Autotask datasource.
"""

# Resource call paths
RESOURCE_ZONE_INFO = "zoneinfo"
RESOURCE_QUERY = "query"
RESOURCE_TEST = "test"

# Resource query calls run as a single query under this refId
RESOURCE_QUERY_REF_ID = "A"

# Upper bound on one inbound request, after which outbound calls are cancelled
QUERY_TIMEOUT_SECONDS = 120

# Upstream statuses reported to the caller unchanged
PASSTHROUGH_STATUS_CODES = frozenset({400, 401, 403, 404, 429})

# Messages
HEALTH_OK_MESSAGE = "Connected to Autotask (Zone: {zoneName})"
HEALTH_ERROR_MESSAGE = "Failed to connect to Autotask: {error}"
INSTANCE_ERROR_MESSAGE = "Failed to get instance: {error}"
TEST_SUCCESS_MESSAGE = "Successfully connected to Autotask API"

LOG_PREFIX = "AUTOTASK_DATASOURCE"
