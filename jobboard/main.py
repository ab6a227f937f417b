from jobboard.api.main import app

if __name__ == "__main__":
    import logging
    import uvicorn
    settings = app.state.settings
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(app, host=settings.host, port=settings.port)
