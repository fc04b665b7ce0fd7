# -*- coding: utf-8 -*-
"""
__main__

Allow ``python -m newmodule`` to run the scaffolder.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .utils.cli import cli

if __name__ == "__main__":
    cli()


# The End
