# -*- coding: utf-8 -*-
"""
utils

Helper packages for the newmodule toolkit.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""


# The End
