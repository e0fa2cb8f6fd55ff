"""Shared fixtures: recorded OC Transpo payloads and a local stand-in API server."""

import asyncio
from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from urllib.parse import parse_qsl

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from octranspo_api.adapters.octranspo_api.connection import Connection

ROUTE_SUMMARY_XML = """<?xml version="1.0" encoding="utf-8"?>
<soap:Envelope xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/" xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" xmlns:xsd="http://www.w3.org/2001/XMLSchema">
  <soap:Body>
    <GetRouteSummaryForStopResponse xmlns="http://octranspo.com">
      <GetRouteSummaryForStopResult>
        <StopNo xmlns="http://tempuri.org/">7659</StopNo>
        <StopDescription xmlns="http://tempuri.org/">BANK / FIFTH</StopDescription>
        <Error xmlns="http://tempuri.org/">TestErrorStringHere</Error>
        <Routes xmlns="http://tempuri.org/">
          <Route>
            <RouteNo>6</RouteNo>
            <DirectionID>1</DirectionID>
            <Direction>Northbound</Direction>
            <RouteHeading>Rockcliffe</RouteHeading>
          </Route>
          <Route>
            <RouteNo>7</RouteNo>
            <DirectionID>1</DirectionID>
            <Direction>Eastbound</Direction>
            <RouteHeading>St-Laurent</RouteHeading>
          </Route>
        </Routes>
      </GetRouteSummaryForStopResult>
    </GetRouteSummaryForStopResponse>
  </soap:Body>
</soap:Envelope>"""

ROUTE_SUMMARY_ERROR_XML = """<?xml version="1.0" encoding="utf-8"?>
<soap:Envelope xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/">
  <soap:Body>
    <GetRouteSummaryForStopResponse xmlns="http://octranspo.com">
      <GetRouteSummaryForStopResult>
        <Error xmlns="http://tempuri.org/">10</Error>
      </GetRouteSummaryForStopResult>
    </GetRouteSummaryForStopResponse>
  </soap:Body>
</soap:Envelope>"""

NEXT_TRIPS_XML = """<?xml version="1.0" encoding="utf-8"?>
<soap:Envelope xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/" xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" xmlns:xsd="http://www.w3.org/2001/XMLSchema">
  <soap:Body>
    <GetNextTripsForStopResponse xmlns="http://octranspo.com">
      <GetNextTripsForStopResult>
        <StopNo xmlns="http://tempuri.org/">3020</StopNo>
        <StopLabel xmlns="http://tempuri.org/">LAURIER STATION</StopLabel>
        <Error xmlns="http://tempuri.org/">TestErrorStringHere</Error>
        <Route xmlns="http://tempuri.org/">
          <RouteDirection>
            <RouteNo>94</RouteNo>
            <RouteLabel>Riverview</RouteLabel>
            <Direction>Westbound</Direction>
            <Error>TestRouteDirectionErrorHere</Error>
            <RequestProcessingTime>20180831114042</RequestProcessingTime>
            <Trips>
              <Trip>
                <TripDestination>Riverview</TripDestination>
                <TripStartTime>11:13</TripStartTime>
                <AdjustedScheduleTime>16</AdjustedScheduleTime>
                <AdjustmentAge>0.34</AdjustmentAge>
                <LastTripOfSchedule>false</LastTripOfSchedule>
                <BusType>6EB - 60</BusType>
                <Latitude>45.431521</Latitude>
                <Longitude>-75.605296</Longitude>
                <GPSSpeed>63.0</GPSSpeed>
              </Trip>
              <Trip>
                <TripDestination>Riverview</TripDestination>
                <TripStartTime>10:59</TripStartTime>
                <AdjustedScheduleTime>17</AdjustedScheduleTime>
                <AdjustmentAge>0.32</AdjustmentAge>
                <LastTripOfSchedule>false</LastTripOfSchedule>
                <BusType>4EB - DD</BusType>
                <Latitude>45.426999</Latitude>
                <Longitude>-75.600192</Longitude>
                <GPSSpeed>11.4</GPSSpeed>
              </Trip>
            </Trips>
          </RouteDirection>
          <RouteDirection>
            <RouteNo>94</RouteNo>
            <RouteLabel>Millennium</RouteLabel>
            <Direction>Eastbound</Direction>
            <Error/>
            <RequestProcessingTime>20180831114042</RequestProcessingTime>
            <Trips>
              <Trip>
                <TripDestination>Millennium</TripDestination>
                <TripStartTime>11:00</TripStartTime>
                <AdjustedScheduleTime>12</AdjustedScheduleTime>
                <AdjustmentAge>0.44</AdjustmentAge>
                <LastTripOfSchedule>false</LastTripOfSchedule>
                <BusType>4EB - DD</BusType>
                <Latitude>45.404710</Latitude>
                <Longitude>-75.732058</Longitude>
                <GPSSpeed>15.9</GPSSpeed>
              </Trip>
              <Trip>
                <TripDestination>Millennium</TripDestination>
                <TripStartTime>11:15</TripStartTime>
                <AdjustedScheduleTime>25</AdjustedScheduleTime>
                <AdjustmentAge>0.49</AdjustmentAge>
                <LastTripOfSchedule>false</LastTripOfSchedule>
                <BusType>6EB - 60</BusType>
                <Latitude>45.344501</Latitude>
                <Longitude>-75.758024</Longitude>
                <GPSSpeed>19.2</GPSSpeed>
              </Trip>
            </Trips>
          </RouteDirection>
        </Route>
      </GetNextTripsForStopResult>
    </GetNextTripsForStopResponse>
  </soap:Body>
</soap:Envelope>"""

NEXT_TRIPS_ALL_ROUTES_XML = """<?xml version="1.0" encoding="utf-8"?>
<soap:Envelope xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/" xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" xmlns:xsd="http://www.w3.org/2001/XMLSchema">
  <soap:Body>
    <GetRouteSummaryForStopResponse xmlns="http://octranspo.com">
      <GetRouteSummaryForStopResult>
        <StopNo xmlns="http://tempuri.org/">3020</StopNo>
        <StopDescription xmlns="http://tempuri.org/">LAURIER STATION</StopDescription>
        <Error xmlns="http://tempuri.org/"/>
        <Routes xmlns="http://tempuri.org/">
          <Route>
            <RouteNo>97</RouteNo>
            <DirectionID>0</DirectionID>
            <Direction>Eastbound</Direction>
            <RouteHeading>Airport / Aéroport</RouteHeading>
            <Trips>
              <Trip>
                <TripDestination>Airport / Aéroport</TripDestination>
                <TripStartTime>13:14</TripStartTime>
                <AdjustedScheduleTime>8</AdjustedScheduleTime>
                <AdjustmentAge>0.42</AdjustmentAge>
                <LastTripOfSchedule/>
                <BusType>6EB - 60</BusType>
                <Latitude>45.413769</Latitude>
                <Longitude>-75.710547</Longitude>
                <GPSSpeed>25.7</GPSSpeed>
              </Trip>
              <Trip>
                <TripDestination>Airport / Aéroport</TripDestination>
                <TripStartTime>13:29</TripStartTime>
                <AdjustedScheduleTime>22</AdjustedScheduleTime>
                <AdjustmentAge>-1</AdjustmentAge>
                <LastTripOfSchedule/>
                <BusType>4LB - DD</BusType>
                <Latitude/>
                <Longitude/>
                <GPSSpeed/>
              </Trip>
            </Trips>
          </Route>
          <Route>
            <RouteNo>97</RouteNo>
            <DirectionID>1</DirectionID>
            <Direction>Westbound</Direction>
            <RouteHeading>Bells Corners</RouteHeading>
            <Trips>
              <Trip>
                <TripDestination>Tunney's Pasture</TripDestination>
                <TripStartTime>13:02</TripStartTime>
                <AdjustedScheduleTime>16</AdjustedScheduleTime>
                <AdjustmentAge>0.51</AdjustmentAge>
                <LastTripOfSchedule/>
                <BusType> - DD</BusType>
                <Latitude>45.384286</Latitude>
                <Longitude>-75.676965</Longitude>
                <GPSSpeed>18.1</GPSSpeed>
              </Trip>
            </Trips>
          </Route>
          <Route>
            <RouteNo>98</RouteNo>
            <DirectionID>1</DirectionID>
            <Direction>Northbound</Direction>
            <RouteHeading>Tunney's Pasture</RouteHeading>
            <Trips>
              <Trip>
                <TripDestination>LeBreton</TripDestination>
                <TripStartTime>12:46</TripStartTime>
                <AdjustedScheduleTime>14</AdjustedScheduleTime>
                <AdjustmentAge>0.37</AdjustmentAge>
                <LastTripOfSchedule/>
                <BusType>6EB - 60</BusType>
                <Latitude>45.410505</Latitude>
                <Longitude>-75.664115</Longitude>
                <GPSSpeed>51.1</GPSSpeed>
              </Trip>
              <Trip>
                <TripDestination>LeBreton</TripDestination>
                <TripStartTime>13:01</TripStartTime>
                <AdjustedScheduleTime>26</AdjustedScheduleTime>
                <AdjustmentAge>0.44</AdjustmentAge>
                <LastTripOfSchedule/>
                <BusType>6EAB - 60</BusType>
                <Latitude/>
                <Longitude/>
                <GPSSpeed/>
              </Trip>
            </Trips>
          </Route>
        </Routes>
      </GetRouteSummaryForStopResult>
    </GetRouteSummaryForStopResponse>
  </soap:Body>
</soap:Envelope>"""

GTFS_AGENCY_JSON = """{"Query":{"table":"agency",
                        "direction":"ASC","format":"json"},
             "Gtfs":[{"id":"1","agency_name":"Test Agency",
                      "agency_url":"http://test.com",
                      "agency_timezone":"America/Toronto",
                      "agency_lang":"","agency_phone":""}]}"""

GTFS_CALENDAR_JSON = """{"Query": {"table":"calendar","direction":"ASC","column":
                         "id","value":"1","format":"json"},
               "Gtfs": [{"id":"1",
                         "service_id":"JUN26-JUNDA13-Weekday-01",
                         "monday":"1","tuesday":"1","wednesday":"1",
                         "thursday":"1","friday":"1","saturday":"0",
                         "sunday":"0","start_date": "20130626",
                         "end_date": "20130627"}]}"""

GTFS_CALENDAR_DATES_JSON = """{"Query":{"table":"calendar_dates",
                        "direction":"ASC","column":"id","value":"1",
                        "format":"json"},
                "Gtfs":[{"id":"1",
                         "service_id":"JUN13-JUNDA13-Weekday-99",
                         "date":"20130701","exception_type":"2"}]}"""

GTFS_ROUTES_JSON = """{"Query":{"table":"routes","direction":"ASC",
                        "column":"id","value":"1","format":"json"},
               "Gtfs":[{"id":"1","route_id":"1-146",
                        "route_short_name":"1","route_long_name":"",
                        "route_desc":"","route_type":"3"}]}"""

GTFS_STOPS_JSON = """{"Query":{"table":"stops","direction":"ASC",
                        "column":"stop_id","value":"AA010",
                        "format":"json"},
               "Gtfs":[{"id":"1","stop_id":"AA010","stop_code":"8767",
                        "stop_name":"SUSSEX / CHUTE RIDEAU FALLS",
                        "stop_desc":"","stop_lat":"45.4399",
                        "stop_lon":"-75.6958","stop_street":"",
                        "stop_city":"","stop_region":"",
                        "stop_postcode":"","stop_country":"","zone_id":""}]}"""

GTFS_STOP_TIMES_JSON = """{"Query":{"table":"stop_times","direction":"ASC",
                        "column":"stop_id","value":"AA010",
                        "format":"json"},
               "Gtfs":[{"id":"133436",
                        "trip_id":"27212870-CADA13-CADA13-Sunday-71",
                        "arrival_time":"08:29:00",
                        "departure_time":"08:29:00","stop_id":"AA010",
                        "stop_sequence":"20","pickup_type":"0",
                        "drop_off_type":"0"}]}"""

GTFS_TRIPS_JSON = """{"Query":{"table":"trips","direction":"ASC",
                        "column":"route_id","value":"135-147",
                        "format":"json"},
               "Gtfs":[{"id":"1","route_id":"135-147",
                        "service_id":"CADA13-CADA13-Sunday-71",
                        "trip_id":"27210104-CADA13-CADA13-Sunday-71",
                        "trip_headsign":"Esprit",
                        "block_id":"3406628"}]}"""


@dataclass
class RecordedRequest:
    """A request received by the stand-in API."""

    method: str
    endpoint: str
    query: dict[str, str]
    form: dict[str, str]
    body: bytes
    content_type: str


@dataclass
class FakeOcTranspoApi:
    """Local stand-in for the OC Transpo API, serving canned bodies per endpoint."""

    base_url: str = ""
    responses: dict[str, tuple[int, bytes, str]] = field(default_factory=dict)
    requests: list[RecordedRequest] = field(default_factory=list)
    delay_seconds: float = 0.0

    def respond(
        self,
        endpoint: str,
        body: str | bytes,
        status: int = 200,
        content_type: str = "text/xml; charset=utf-8",
    ) -> None:
        """Serve ``body`` for every request to ``endpoint``."""
        payload = body.encode("utf-8") if isinstance(body, str) else body
        self.responses[endpoint] = (status, payload, content_type)

    async def handle(self, request: web.Request) -> web.Response:
        body = await request.read()
        form = dict(parse_qsl(body.decode("utf-8"))) if request.method == "POST" else {}
        endpoint = request.match_info["endpoint"]
        self.requests.append(
            RecordedRequest(
                method=request.method,
                endpoint=endpoint,
                query=dict(request.query),
                form=form,
                body=body,
                content_type=request.headers.get("Content-Type", ""),
            )
        )
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)

        status, payload, content_type = self.responses.get(
            endpoint, (404, b"Not Found", "text/plain")
        )
        return web.Response(status=status, body=payload, headers={"Content-Type": content_type})


@pytest.fixture
def route_summary_xml() -> bytes:
    return ROUTE_SUMMARY_XML.encode("utf-8")


@pytest.fixture
def route_summary_error_xml() -> bytes:
    return ROUTE_SUMMARY_ERROR_XML.encode("utf-8")


@pytest.fixture
def next_trips_xml() -> bytes:
    return NEXT_TRIPS_XML.encode("utf-8")


@pytest.fixture
def next_trips_all_routes_xml() -> bytes:
    return NEXT_TRIPS_ALL_ROUTES_XML.encode("utf-8")


@pytest.fixture
def gtfs_payloads() -> dict[str, bytes]:
    """Tabular response bodies keyed by table name."""
    return {
        "agency": GTFS_AGENCY_JSON.encode("utf-8"),
        "calendar": GTFS_CALENDAR_JSON.encode("utf-8"),
        "calendar_dates": GTFS_CALENDAR_DATES_JSON.encode("utf-8"),
        "routes": GTFS_ROUTES_JSON.encode("utf-8"),
        "stops": GTFS_STOPS_JSON.encode("utf-8"),
        "stop_times": GTFS_STOP_TIMES_JSON.encode("utf-8"),
        "trips": GTFS_TRIPS_JSON.encode("utf-8"),
    }


@pytest_asyncio.fixture
async def fake_api() -> AsyncIterator[FakeOcTranspoApi]:
    """Run the stand-in API on a local port for the duration of a test."""
    api = FakeOcTranspoApi()
    app = web.Application()
    app.router.add_route("*", "/v1.2/{endpoint}", api.handle)
    server = TestServer(app)
    await server.start_server()
    api.base_url = str(server.make_url("/v1.2/"))
    try:
        yield api
    finally:
        await server.close()


@pytest_asyncio.fixture
async def connection(fake_api: FakeOcTranspoApi) -> AsyncIterator[Connection]:
    """An unlimited connection pointed at the stand-in API."""
    conn = Connection("test-app", "test-key", base_url=fake_api.base_url)
    try:
        yield conn
    finally:
        await conn.close()
