"""
Command-line entry point

    ollama_boolean [options] "<user_prompt>" [model_name]
"""

import logging
import sys
from dataclasses import dataclass
from typing import TextIO

from ollama_boolean.classification import YesNoClassifier
from ollama_boolean.config import config
from ollama_boolean.llm import LLMClient, llm

logger = logging.getLogger(__name__)

PROG = "ollama_boolean"

USAGE = f"""
Usage: {PROG} [options] "<user_prompt>" [model_name]

Arguments:
  user_prompt  The question or prompt to classify (required, must be quoted)
  model_name   The Ollama model to use (optional, defaults to '{config.model()}')

Options:
  -q, --quiet  Output only the result number (0, 1, or 2)
  -h, --help   Show this help message

Examples:
  {PROG} "Is the sky blue?"
  {PROG} "Can pigs fly?" llama3.2
  {PROG} "Is this painting beautiful?" qwen3
  {PROG} --quiet "Is the sky blue?"
  {PROG} -q "Can pigs fly?" llama3.2

  # Without installing:
  python -m ollama_boolean "Is the sky blue?"

Returns:
  1 - Yes/Positive answer
  0 - No/Negative answer
  2 - Unknown/Subjective answer
  Nothing is printed and the exit code is 1 if an error occurred

Environment:
  OLLAMA_HOST     Ollama server address (default: http://localhost:11434)
  OLLAMA_MODEL    Default model name
  OLLAMA_TIMEOUT  Request timeout in seconds (default: 120)
  LOG_LEVEL       Log level for diagnostics in verbose mode (default: WARNING)
  DEBUG           Set to "true" for debug diagnostics in verbose mode
"""

HELP_FLAGS = {"--help", "-h"}
QUIET_FLAGS = {"--quiet", "-q"}


@dataclass(frozen=True)
class CliInvocation:
    """Parsed command line"""

    help_requested: bool
    quiet: bool
    prompt: str | None
    model: str


def parse_invocation(argv: list[str]) -> CliInvocation:
    """
    Split argv into flags and positionals.

    Every token starting with "-" is a flag; flags other than the help and
    quiet ones are ignored. Prompts that start with "-" therefore cannot be
    passed.
    """
    positionals = [arg for arg in argv if not arg.startswith("-")]
    return CliInvocation(
        help_requested=any(arg in HELP_FLAGS for arg in argv),
        quiet=any(arg in QUIET_FLAGS for arg in argv),
        prompt=positionals[0] if positionals else None,
        model=positionals[1] if len(positionals) > 1 and positionals[1] else config.model(),
    )


def print_usage(file: TextIO | None = None) -> None:
    print(USAGE, file=file or sys.stdout)


def configure_logging(quiet: bool) -> None:
    """Verbose mode logs to stderr at LOG_LEVEL; quiet mode emits nothing."""
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=logging.WARNING,
        stream=sys.stderr
    )
    package_logger = logging.getLogger("ollama_boolean")
    if quiet:
        package_logger.setLevel(logging.CRITICAL + 1)
    else:
        level = logging.getLevelName(config.log_level())
        # getLevelName returns a string for names that are not levels
        package_logger.setLevel(level if isinstance(level, int) else logging.WARNING)


def _error(invocation: CliInvocation, message: str) -> None:
    if not invocation.quiet:
        print(message, file=sys.stderr)


def main(argv: list[str] | None = None, client: LLMClient | None = None) -> int:
    """
    Run one classification and return the process exit code.

    Args:
        argv: Arguments without the program name, sys.argv[1:] if omitted
        client: LLM client to use, the configured Ollama client if omitted
    """
    invocation = parse_invocation(sys.argv[1:] if argv is None else list(argv))

    if invocation.help_requested:
        print_usage()
        return 0

    try:
        configure_logging(invocation.quiet)

        if invocation.prompt is None:
            if not invocation.quiet:
                print("Error: User prompt is required", file=sys.stderr)
                print_usage(sys.stderr)
            return 1

        if not invocation.prompt.strip():
            _error(invocation, "Error: User prompt cannot be empty")
            return 1

        classifier = YesNoClassifier(llm=client or llm())

        if not invocation.quiet:
            print(f'Prompt: "{invocation.prompt}"')
            print(f"Model: {invocation.model}")
            print("Classifying...\n")

        result = classifier.classify(invocation.prompt, invocation.model)

        if not result.is_available:
            reason = f" ({result.error})" if result.error else ""
            _error(invocation, f"Error: Failed to get classification result{reason}")
            return 1

        if invocation.quiet:
            # Only output the number
            print(result.value)
        else:
            print(f"Result: {result.value}")
            print(f"Interpretation: {result.classification.label}")
            logger.debug(
                f"Tokens: {result.tokens_input} in, {result.tokens_output} out, "
                f"{result.processing_time_ms}ms"
            )
            logger.debug(f"Session usage: {classifier.llm.get_usage_stats()}")
        return 0

    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        _error(invocation, f"Error: {e}")
        return 1


def run() -> None:
    """Console script entry point"""
    sys.exit(main())
