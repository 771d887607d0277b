"""Runtime configuration read from environment variables"""
import os
from urllib.parse import urlencode

# USGS FDSN event web service
USGS_QUERY_URL = os.getenv('USGS_QUERY_URL', 'https://earthquake.usgs.gov/fdsnws/event/1/query')

USGS_QUERY_PARAMS = {
    'format': 'geojson',
    'starttime': '2016-01-01',
    'endtime': '2016-05-02',
    'minfelt': 50,
    'minmagnitude': 5,
}

USGS_REQUEST_URL = os.getenv(
    'USGS_REQUEST_URL',
    f"{USGS_QUERY_URL}?{urlencode(USGS_QUERY_PARAMS)}",
)

# Seconds
HTTP_CONNECT_TIMEOUT = float(os.getenv('HTTP_CONNECT_TIMEOUT', '15'))
HTTP_READ_TIMEOUT = float(os.getenv('HTTP_READ_TIMEOUT', '10'))

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
