from typing import List

from fastapi import FastAPI, File, HTTPException, UploadFile

from .errors import PatternError
from .models import CompileResponse, HealthResponse
from .pipeline import compile_patterns
from .rules import SOURCE_SUFFIXES
from .sources import load_document

app = FastAPI(
    title="patterndb",
    description="Validated compilation of inconsiderate phrase datasets",
    version="0.1.0",
)


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post(
    "/compile",
    response_model=CompileResponse,
    response_model_exclude_none=True,
)
async def compile_documents(files: List[UploadFile] = File(...)):
    for file in files:
        if not (file.filename or "").lower().endswith(SOURCE_SUFFIXES):
            raise HTTPException(status_code=422, detail="Only YAML files are supported")

    raw_entries = []
    try:
        for file in files:
            raw_entries.extend(load_document(await file.read(), file.filename))
        patterns = compile_patterns(raw_entries)
    except PatternError as exc:
        raise HTTPException(status_code=422, detail=exc.to_detail())

    return {
        "patterns": patterns,
        "summary": {
            "documents": len(files),
            "entries": len(patterns),
            "phrases": sum(len(entry.inconsiderate) for entry in patterns),
        },
    }
