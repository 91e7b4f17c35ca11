"""README example sync.

Keeps fenced code samples in a Markdown document in step with the example
files they were copied from, and keeps recorded output blocks in step with
what those examples print when executed.

A block is claimed by a marker comment on the line directly above it:
    <!-- source: examples/basic.php -->
    ```php
    ...contents of examples/basic.php...
    ```

    <!-- output: examples/basic.php -->
    ```php
    ...stdout + stderr of running examples/basic.php...
    ```

Everything else in the document is passed through untouched.
"""

__version__ = "0.3.0"

SOURCE_MARKER = r"^<!-- source: (.+) -->$"
OUTPUT_MARKER = r"^<!-- output: (.+) -->$"

OPEN_FENCE = r"^```php\s*$"
CLOSE_FENCE = "```"

OPEN_TAG = "<?php"

AUTOLOAD_RELATIVE = "../vendor/autoload.php"
AUTOLOAD_DISPLAY = "vendor/autoload.php"
