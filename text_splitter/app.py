from fastapi import FastAPI, HTTPException

from .config import SplitterServiceConfig
from .exceptions import InvalidArgumentError, SegmentationFailure
from .models import (
    SplitFileRequest,
    SplitFileResponse,
    SplitRequest,
    SplitResponse,
)
from .service import SplitterService


def create_app(config: SplitterServiceConfig | None = None) -> FastAPI:
    service = SplitterService(config)
    app = FastAPI(
        title="Text Splitter Service",
        version="1.0.0",
        description="Token-bounded paragraph, sentence and word chunking.",
    )

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.post("/split", response_model=SplitResponse)
    def split(request: SplitRequest) -> SplitResponse:
        try:
            result = service.split_text(
                request.text,
                document_id=request.document_id,
                max_tokens=request.max_tokens,
            )
        except InvalidArgumentError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except SegmentationFailure as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return SplitResponse(
            document_id=result.document_id,
            total_chunks=result.total_chunks,
            chunks=result.chunks,
            stats=result.stats,
        )

    @app.post("/split/file", response_model=SplitFileResponse)
    def split_file(request: SplitFileRequest) -> SplitFileResponse:
        try:
            result, output_path = service.split_and_save(
                request.path, max_tokens=request.max_tokens
            )
        except FileNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise HTTPException(
                status_code=400, detail=f"File is not valid UTF-8: {request.path}"
            ) from exc
        except InvalidArgumentError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except SegmentationFailure as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return SplitFileResponse(
            document_id=result.document_id,
            output_path=output_path,
            total_chunks=result.total_chunks,
        )

    return app


app = create_app(SplitterServiceConfig.from_env())
