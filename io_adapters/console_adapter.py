# io_adapters/console_adapter.py

from io_adapters.io_adapter import IOAdapter

class ConsoleAdapter(IOAdapter):
    """
    A command-line IO adapter for the booking desk:
      - prompt(text): prints a message or a rendered view
      - collect(prompt_text): prints the prompt_text (without newline),
                              reads a line from stdin, and returns it.
      - confirm(text): prints a success message
    """
    def prompt(self, message: str):
        print(message)

    def collect(self, prompt_text: str) -> str:
        # empty string if they just hit enter
        return input(prompt_text).strip()

    def confirm(self, message: str):
        print(f"✅ {message}")
