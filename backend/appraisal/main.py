from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from appraisal.routes.quote_route import router as quote_router
from appraisal.routes.map_route import router as map_router
from appraisal.routes.services_route import router as services_router

app = FastAPI(title="Cotizador de Avaluos")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(quote_router)
app.include_router(map_router)
app.include_router(services_router)

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {
        "message": "Welcome to the Appraisal Quoting API",
        "status": "running",
        "endpoints": {
            "health": "/health",
            "quote": "/quote/{session_id}",
            "map": "/map/{session_id}",
            "geocode": "/geocode",
            "services": "/services",
            "docs": "/docs"
        },
        "version": "1.0.0"
    }

# --- Health Check ---
@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "Cotizador de Avaluos"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("appraisal.main:app", host="0.0.0.0", port=8000, reload=True)
