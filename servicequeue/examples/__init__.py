"""
Examples for the service queue.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""
