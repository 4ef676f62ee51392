"""
Constants for the Autotask REST API integration.
"""

# Zone discovery and API versioning
BASE_ZONE_INFO_URL = "https://webservices.autotask.net/atservicesrest/v1.0/ZoneInformation"
DEFAULT_WEBSERVICES_URL = "https://webservices.autotask.net"
ZONE_INFO_PATH = "/atservicesrest/v1.0/ZoneInformation"
API_VERSION = "v1.0"
ZONE_PATH_SEGMENT = "ATServicesRest"

# Request configuration
DEFAULT_USER_AGENT = "Autotask Python Client"
DEFAULT_MAX_RECORDS = 500
MAX_RECORDS_PER_PAGE = 500

# Default filters applied when a query has no filter expression
TICKET_STATUS_COMPLETE = 5

# Log prefixes
LOG_PREFIX_CLIENT = "AUTOTASK_CLIENT"
LOG_PREFIX_ZONE = "AUTOTASK_ZONE"
LOG_PREFIX_ENTITY = "AUTOTASK_ENTITY"
