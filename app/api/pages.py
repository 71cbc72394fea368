"""
HTML pages
"""
from fastapi.responses import HTMLResponse

HOME_PAGE = """<!DOCTYPE html>
<html>
<head>
    <title>Kubernetes Web App</title>
    <style>
        body { font-family: Arial, sans-serif; margin: 40px; background-color: #f4f4f4; }
        .container { background: white; padding: 20px; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); }
        h1 { color: #333; }
        .endpoint { background: #e8f4f8; padding: 10px; margin: 10px 0; border-radius: 4px; }
    </style>
</head>
<body>
    <div class="container">
        <h1>Kubernetes Web Application</h1>
        <p>Welcome to the containerized web application!</p>
        <h3>Available Endpoints:</h3>
        <div class="endpoint"><strong>GET /</strong> - This page</div>
        <div class="endpoint"><strong>GET /api/hello</strong> - JSON API endpoint</div>
        <div class="endpoint"><strong>GET /health</strong> - Health check</div>
        <div class="endpoint"><strong>GET /ready</strong> - Readiness probe</div>
    </div>
</body>
</html>
"""


async def home() -> HTMLResponse:
    """Landing page listing the available endpoints."""
    return HTMLResponse(content=HOME_PAGE)
