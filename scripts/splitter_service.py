import argparse

import uvicorn

from text_splitter.app import create_app
from text_splitter.config import SplitterServiceConfig
from text_splitter.models import SplitterConfig
from text_splitter.service import SplitterService


def build_config(annotator: str, max_tokens: int, data_dir: str) -> SplitterServiceConfig:
    return SplitterServiceConfig(
        data_dir=data_dir,
        splitter=SplitterConfig(max_tokens=max_tokens, annotator=annotator),
    )


def run_split(config: SplitterServiceConfig, path: str, output_path: str | None = None) -> None:
    service = SplitterService(config)
    result, stored_path = service.split_and_save(path)
    print(f"document_id: {result.document_id}")
    print(f"output_path: {stored_path}")
    print(f"chunks: {result.total_chunks}")
    if output_path:
        result.save(output_path)
        print(f"saved_copy: {output_path}")


def run_server(config: SplitterServiceConfig, host: str, port: int) -> None:
    app = create_app(config)
    uvicorn.run(app, host=host, port=port)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Text splitter runner (CLI split or API server)."
    )
    parser.add_argument("--serve", action="store_true", help="Run FastAPI server")
    parser.add_argument("--host", default="0.0.0.0", help="Server host")
    parser.add_argument("--port", type=int, default=8002, help="Server port")
    parser.add_argument("--file", help="Path to a text file to split")
    parser.add_argument("--output", help="Optional output path for the split JSON")
    parser.add_argument("--max-tokens", type=int, default=256, help="Token budget per chunk")
    parser.add_argument(
        "--annotator", choices=["tiktoken", "whitespace"], default="tiktoken"
    )
    parser.add_argument("--data-dir", default="data/splitter", help="Storage directory")
    args = parser.parse_args()

    config = build_config(args.annotator, args.max_tokens, args.data_dir)
    if args.serve:
        run_server(config, args.host, args.port)
        return

    if not args.file:
        parser.error("Provide --file or use --serve to run the API.")
    run_split(config, args.file, args.output)


if __name__ == "__main__":
    main()
