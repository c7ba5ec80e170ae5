from fastapi import APIRouter, Request
from fastapi.responses import Response

from ...consts import CONFIG_ROUTE, YAML_CONTENT_TYPE
from ...document import render_config

router = APIRouter(tags=["admin"])


@router.get(CONFIG_ROUTE)
def get_admin_config(request: Request):
    body = render_config(request.app.state.settings)
    return Response(content=body, headers={"Content-Type": YAML_CONTENT_TYPE})
