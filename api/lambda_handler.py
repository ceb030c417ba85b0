"""
Lambda entrypoint for FastAPI.
Handles API Gateway and Lambda Function URL events; every invocation is
independent, so the ASGI lifespan is not run.
"""
from mangum import Mangum
from api.main import app

handler = Mangum(app, lifespan="off")
