"""ArtGuard application shell: settings, FastAPI app, HTTP routers."""
