"""Package entrypoint.

`python -m prompt_edit [FILE]` launches the editor.
"""

from prompt_edit.ui.app import main


if __name__ == "__main__":
    main()
