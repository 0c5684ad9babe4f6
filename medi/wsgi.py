"""
WSGI config for medi project.
"""
import os

from django.core.wsgi import get_wsgi_application
from dotenv import load_dotenv

load_dotenv()

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'medi.settings')

application = get_wsgi_application()
