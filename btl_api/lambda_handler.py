"""AWS Lambda entry point.

Mangum translates API Gateway (REST and HTTP API) events into ASGI,
letting the FastAPI app run unchanged on Lambda. The app is built once per
cold start and reused for every invocation the runtime hands over.
"""

from mangum import Mangum

from btl_api.main import create_app

app = create_app()

handler = Mangum(app, lifespan="off")
