"""Constants for the OC Transpo API adapter.

API Documentation: https://www.octranspo.com/en/plan-your-trip/travel-tools/developers/

Default quota: 10,000 requests/day per application.
Authentication: appID and apiKey sent with every request.
"""

# API endpoints
API_URL_PREFIX = "https://api.octranspo1.com/v1.2/"

ROUTE_SUMMARY_FOR_STOP = "GetRouteSummaryForStop"  # POST stopNo
NEXT_TRIPS_FOR_STOP = "GetNextTripsForStop"  # POST routeNo, stopNo
NEXT_TRIPS_FOR_STOP_ALL_ROUTES = "GetNextTripsForStopAllRoutes"  # POST stopNo
GTFS = "Gtfs"  # GET table, id, column, value, orderBy, limit

# Name used for the connection's rate limiter in log messages
API_NAME = "octranspo_api"

# HTTP headers
FORM_HEADERS = {
    "Content-Type": "application/x-www-form-urlencoded",
}
JSON_HEADERS = {
    "Accept": "application/json",
}

# RequestProcessingTime is local time at the agency, YYYYMMDDhhmmss
AGENCY_TIMEZONE = "America/Toronto"
REQUEST_PROCESSING_TIME_FORMAT = "%Y%m%d%H%M%S"

# GTFS tables
TABLE_AGENCY = "agency"
TABLE_CALENDAR = "calendar"
TABLE_CALENDAR_DATES = "calendar_dates"
TABLE_ROUTES = "routes"
TABLE_STOPS = "stops"
TABLE_STOP_TIMES = "stop_times"
TABLE_TRIPS = "trips"

# Tables too large to request without an id or column/value selector
TABLES_REQUIRING_SELECTOR = frozenset({TABLE_STOPS, TABLE_STOP_TIMES, TABLE_TRIPS})

SORT_DIRECTIONS = ("asc", "desc")
