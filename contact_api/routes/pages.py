"""
Contact page served from STATIC_DIR
"""
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import FileResponse

router = APIRouter(tags=["Pages"])

CONTACT_PAGE = "contacto.html"


@router.get("/contacto", include_in_schema=False)
async def contact_page(request: Request):
    page = request.app.state.settings.STATIC_DIR / CONTACT_PAGE
    if not page.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return FileResponse(page, media_type="text/html")
