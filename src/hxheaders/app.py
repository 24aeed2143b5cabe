from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse, Response
from dotenv import load_dotenv
from .headers import Swap
from .htmx import Htmx
from .middleware import HtmxMiddleware, feature_enabled, get_htmx
from .obs.prom import prometheus_latest
from .utils.logging import get_logger

load_dotenv()

app = FastAPI(title="hxheaders demo")
log = get_logger()

# HTMX middleware (parses HX-* request headers, flushes directives)
if feature_enabled():
    app.add_middleware(HtmxMiddleware)

ITEMS = {1: "alpha", 2: "beta", 3: "gamma"}

def _rows() -> str:
    return "".join(f'<li id="item-{i}">{name}</li>' for i, name in ITEMS.items())

@app.get("/__health")
async def health():
    return {"status": "ok"}

@app.get("/metrics")
def metrics():
    payload, content_type = prometheus_latest()
    return Response(payload, media_type=content_type)

@app.get("/items", response_class=HTMLResponse)
async def list_items(hx: Htmx = Depends(get_htmx)):
    # Partial for HTMX swaps, full page for normal navigation and history restores
    if hx.is_request() and not hx.is_history_restore_request():
        resp = HTMLResponse(f"<ul>{_rows()}</ul>")
        hx.trigger("items-loaded").apply(resp.headers)
        return resp
    return HTMLResponse(f"<html><body><ul id=\"items\">{_rows()}</ul></body></html>")

@app.delete("/items/{item_id}")
async def delete_item(item_id: int, hx: Htmx = Depends(get_htmx)):
    if item_id not in ITEMS:
        raise HTTPException(status_code=404, detail="item not found")
    ITEMS.pop(item_id)
    resp = HTMLResponse("")
    hx.reswap(Swap.OUTER_HTML).retarget(f"#item-{item_id}").trigger({"item-deleted": {"id": item_id}})
    hx.apply(resp.headers)
    return resp

@app.post("/login")
async def login(hx: Htmx = Depends(get_htmx)):
    if hx.is_request():
        resp = Response(status_code=204)
        hx.redirect("/items").apply(resp.headers)
        return resp
    return Response(status_code=303, headers={"Location": "/items"})

@app.get("/echo/htmx")
async def echo_htmx(hx: Htmx = Depends(get_htmx)):
    return JSONResponse({"request": hx.request.model_dump(), "prompt": hx.get_prompt()})
