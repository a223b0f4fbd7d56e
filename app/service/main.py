import uvicorn
from app.service.app import create_app
from app.service.core.config import get_settings

app = create_app()

if __name__ == "__main__":
    s = get_settings()
    uvicorn.run("app.service.main:app", host=s.HOST, port=s.PORT, reload=s.DEBUG)
