#!/usr/bin/env python3
"""
xlit Pipeline Execution Script
End-to-end run of one chat message: detect -> correct -> transliterate -> translate
"""

import argparse
import asyncio
import sys
import time

# Import the pipeline
from xlit.src.main import BidirectionalPipeline
from xlit.src.core.config import CONFIDENCE_THRESHOLDS, FALLBACK_BACKEND, MT_ENDPOINT
from xlit.src.api.schemas import TranslationStatus
from xlit.src.services.engine import build_fallback_backend
from xlit.src.services.registry import LanguageRegistry

# Setup logging
from common.logger import setup_xlit_logger
logger = setup_xlit_logger("cli")


def parse_arguments(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description="xlit Pipeline: transliterate and translate one chat message")
    parser.add_argument("--text", "-t", required=True, help="Message as typed by the sender")
    parser.add_argument("--sender-lang", "-s", default="hi", help="Sender's mother tongue (default: hi)")
    parser.add_argument("--receiver-lang", "-r", default="te", help="Receiver's mother tongue (default: te)")
    parser.add_argument("--model", choices=["none", "nllb", "http"], default=FALLBACK_BACKEND,
                        help="Backend consulted when the phrase dictionary misses")
    parser.add_argument("--mt-endpoint", default=MT_ENDPOINT, help="MT service URL for --model http")
    return parser.parse_args(argv)


def quality_label(confidence):
    """Bucket a confidence score for display"""
    for label in ("high", "medium", "low"):
        if confidence >= CONFIDENCE_THRESHOLDS[label]:
            return label
    return "very low"


async def run(args):
    registry = LanguageRegistry()
    pipeline = BidirectionalPipeline(
        registry=registry,
        fallback_backend=build_fallback_backend(args.model, registry, args.mt_endpoint),
    )
    try:
        message = await pipeline.process_outgoing_message(args.text, args.sender_lang, args.receiver_lang)
        message = await pipeline.wait_for_receiver(message.id)
    finally:
        pipeline.shutdown()
    return message


def report(message):
    detection = message.detection
    print(f"Input:          {message.original_input}")
    print(f"Detected:       {detection.language.value} ({detection.script.value}, "
          f"confidence {detection.confidence:.2f}, {quality_label(detection.confidence)})")
    if message.corrections:
        print(f"Corrections:    {', '.join(message.corrections)}")
    print(f"Sender view:    [{message.sender_language.value}] {message.sender_native_text}")
    print(f"Receiver view:  [{message.receiver_language.value}] {message.receiver_native_text}")
    print(f"Status:         {message.status.value}")
    if message.translation is not None:
        outcome = message.translation
        print(f"Method:         {outcome.method.value} ({outcome.direction.value}, "
              f"confidence {outcome.confidence:.2f}, {quality_label(outcome.confidence)})")
        if outcome.english_pivot:
            print(f"English pivot:  {outcome.english_pivot}")
        if outcome.idioms:
            print(f"Idioms:         {', '.join(outcome.idioms)}")
    if message.error:
        print(f"Error:          {message.error}")


def main(argv=None):
    """Main pipeline execution function"""
    try:
        args = parse_arguments(argv)

        logger.info("=== xlit Pipeline Execution Started ===")
        logger.info(f"Sender language: {args.sender_lang}")
        logger.info(f"Receiver language: {args.receiver_lang}")
        logger.info(f"Fallback model: {args.model}")

        start_time = time.time()
        message = asyncio.run(run(args))
        report(message)

        logger.info("=== xlit Pipeline Execution Completed ===")
        logger.info(f"Total processing time: {time.time() - start_time:.2f}s")

        return 1 if message.status == TranslationStatus.FAILED else 0

    except KeyboardInterrupt:
        logger.info("Pipeline execution interrupted by user")
        return 1
    except Exception as e:
        logger.error(f"Pipeline execution failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
