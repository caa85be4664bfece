"""Mini README: FastAPI service exposing the Driftpath engine.

Structure:
    * Request models - pydantic schemas for vertices and wind settings.
    * create_application - application factory wiring the JSON routes.

Map and 3D front-ends call these routes to generate trajectories, compare
playground wind against the official sample, summarise uploaded waypoint
files and parse operator coordinate input. Rendering stays client-side.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..configuration import get_settings
from ..geometry import Coordinate
from ..ingestion import load_coordinates_json, parse_coordinate_text
from ..logging_utils import get_logger, set_log_level
from ..mission import calculate_mission_summary, compare_wind_scenarios, format_flight_time
from ..route_planning import PathGenerator, Waypoint, WindConfiguration

LOGGER = get_logger(__name__)


class CoordinateModel(BaseModel):
    """Vertex supplied by the operator in decimal degrees."""

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)

    def to_coordinate(self) -> Coordinate:
        return Coordinate(lat=self.lat, lng=self.lng)


class WindModel(BaseModel):
    """Playground wind override."""

    use_custom_wind: bool = False
    wind_speed: float = Field(0.0, ge=0, le=100, description="Wind speed in km/h.")
    wind_direction: float = Field(0.0, ge=0, le=360, description="Degrees clockwise from North.")

    def to_configuration(self) -> WindConfiguration:
        return WindConfiguration(
            use_custom_wind=self.use_custom_wind,
            wind_speed=self.wind_speed,
            wind_direction=self.wind_direction,
        )


class GenerationRequest(BaseModel):
    vertices: List[CoordinateModel]
    wind: WindModel = Field(default_factory=WindModel)
    max_flight_time_minutes: Optional[float] = Field(None, gt=0)


class SummaryRequest(BaseModel):
    waypoints: List[Dict[str, Any]]
    ideal_coords: List[CoordinateModel] = Field(default_factory=list)


def create_application() -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = get_settings()
    set_log_level(settings.log_level)
    app = FastAPI(title="Driftpath Mission Simulator", version="0.1.0")
    generator = PathGenerator.from_settings(settings)

    @app.get("/health")
    async def health() -> JSONResponse:
        """Report liveness and the active environment label."""

        return JSONResponse({"status": "ok", "environment": settings.environment})

    @app.post("/generate-path")
    async def generate_path(request: GenerationRequest) -> JSONResponse:
        """Generate a trajectory and its summary for the supplied vertices."""

        vertices = [vertex.to_coordinate() for vertex in request.vertices]
        try:
            path = generator.generate(
                vertices,
                request.wind.to_configuration(),
                request.max_flight_time_minutes,
            )
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        summary = calculate_mission_summary(path.waypoints, path.ideal_coords)
        LOGGER.info(
            "Generated %s waypoints (battery_depleted=%s)",
            len(path.waypoints),
            path.battery_depleted,
        )
        payload = path.as_dict()
        payload["summary"] = summary.as_dict()
        payload["flightTime"] = format_flight_time(summary.total_flight_time_hours)
        return JSONResponse(payload)

    @app.post("/compare-wind")
    async def compare_wind(request: GenerationRequest) -> JSONResponse:
        """Contrast the official wind sample with the playground wind."""

        vertices = [vertex.to_coordinate() for vertex in request.vertices]
        try:
            comparison = compare_wind_scenarios(
                vertices,
                request.wind.to_configuration(),
                request.max_flight_time_minutes,
                generator=generator,
            )
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(comparison.as_dict())

    @app.post("/mission-summary")
    async def mission_summary(request: SummaryRequest) -> JSONResponse:
        """Summarise a previously exported waypoint array."""

        try:
            waypoints = [Waypoint.from_dict(record) for record in request.waypoints]
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        ideal_coords = [coordinate.to_coordinate() for coordinate in request.ideal_coords]
        summary = calculate_mission_summary(waypoints, ideal_coords)
        LOGGER.debug("Summarised %s uploaded waypoints", len(waypoints))
        return JSONResponse(summary.as_dict())

    @app.post("/parse-coordinates")
    async def parse_coordinates(raw_text: str = Form(...)) -> JSONResponse:
        """Extract ``lat, lng`` pairs from the operator text box."""

        try:
            points = parse_coordinate_text(raw_text)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse({"vertices": [point.as_dict() for point in points]})

    @app.post("/upload-coordinates")
    async def upload_coordinates(coordinates: UploadFile = File(...)) -> JSONResponse:
        """Read vertices from an uploaded JSON array."""

        data = await coordinates.read()
        LOGGER.info("Received coordinate upload %s (%s bytes)", coordinates.filename, len(data))
        try:
            points = load_coordinates_json(data.decode("utf-8"))
        except UnicodeDecodeError as error:
            raise HTTPException(status_code=400, detail="Failed to read the file.") from error
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse({"vertices": [point.as_dict() for point in points]})

    return app
