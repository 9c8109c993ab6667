from settings import get_settings
import httpx


# No retries or caching; transport errors propagate to the caller.
async def fetch_product(barcode: str) -> httpx.Response:
    settings = get_settings()
    url = settings.product_url(barcode)
    headers = {"User-Agent": settings.off_user_agent, "Accept": "application/json"}
    async with httpx.AsyncClient(follow_redirects=True) as client:
        return await client.get(url, headers=headers)
