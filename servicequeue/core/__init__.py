"""
Core types shared by the service queue modules.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""
