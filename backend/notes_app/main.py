from fastapi import FastAPI

from notes_app.api import editor, notes, ui

app = FastAPI(title="Notes App")
app.include_router(notes.router)
app.include_router(editor.router)
app.include_router(ui.router)


@app.get("/health")
def health():
    return {"ok": True}
