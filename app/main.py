import logging
from contextlib import asynccontextmanager
from typing import Annotated

import httpx
from fastapi import APIRouter, Body, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from openai import AsyncOpenAI

from app.errors import LearningMapError
from app.llm_pipelines import GenerateMapPipeline
from app.models import ErrorResponse, GenerateMapRequest, LearningMap
from app.resource_validation import build_tree_sanitizer
from app.settings import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)

client = AsyncOpenAI(
    api_key=settings.llm_api_key,
    base_url=str(settings.openai_base_url),
    timeout=settings.llm_timeout,
)

http_client = httpx.AsyncClient(headers={'User-Agent': settings.user_agent})

generate_map_pipeline = GenerateMapPipeline(
    client=client,
    model=settings.model_name,
    sanitizer=build_tree_sanitizer(
        http_client,
        timeout=settings.reachability_timeout,
        limit=settings.max_resources_per_node,
    ),
    temperature=settings.temperature,
)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    yield
    await http_client.aclose()


app = FastAPI(
    title='Learning Map API',
    description=(
        'POST /generate-map: topic + target level ⇒ JSON learning map whose resources '
        'are checked for reachability, paywalls and topical relevance.'
    ),
    version='1.0.0',
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=['*'],
    allow_headers=['*'],
)


@app.exception_handler(LearningMapError)
async def learning_map_error_handler(request: Request, exc: LearningMapError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


router = APIRouter()


@router.post(
    '/generate-map',
    response_model=LearningMap,
    responses={400: {'model': ErrorResponse}, 500: {'model': ErrorResponse}},
    summary='Generate a learning map for a topic',
)
async def generate_map(payload: Annotated[GenerateMapRequest | None, Body()] = None):
    """Generate a learning map and repair its resource links"""
    payload = payload or GenerateMapRequest()
    topic = payload.resolved_topic()
    if not topic:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={'error': "Missing 'topic' in request body."},
        )

    learning_map = await generate_map_pipeline.generate(topic, payload.resolved_level())
    return JSONResponse(content=learning_map)


app.include_router(router)
app.include_router(router, prefix='/api', include_in_schema=False)


@app.get('/', include_in_schema=False)
async def root():
    """Health check"""
    return {'status': 'ok', 'message': 'Learning Map API', 'see': '/docs'}
