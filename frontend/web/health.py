from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/healthz")
def healthz(request: Request) -> dict[str, str]:
    cfg = request.app.state.cfg
    return {"status": "ok", "webroot": cfg.web_root, "hook": cfg.hook_path}
