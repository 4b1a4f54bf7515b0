# -*- encoding: utf-8 -*-
"""
Metadata formatter service: renders ISO19139 records to HTML with
declarative view scripts.
Licence: GPLv3
"""

import dotenv
import os
from flask import Flask
from flask_cors import CORS

from mdformatter.modules.log import print_log


app = Flask(__name__)
CORS(app, resources={r"/api/*": {"origins": "*"}})

# Read environment file
if os.path.exists('.env'):
	print_log(app.name, 'Environment file .env found.')
	dotenv.load_dotenv(dotenv_path='./.env', verbose=True, override=False)
else:
	dotenv.load_dotenv(dotenv_path='./.example.env', override=False)

# Load config based on environment
ENV = os.environ.get('ENV', 'development')
if ENV == 'production':
	app.config.from_object('mdformatter.configuration.ProductionConfig')

elif ENV == 'staging':
	app.config.from_object('mdformatter.configuration.StagingConfig')

elif ENV == 'testing':
	app.config.from_object('mdformatter.configuration.TestingConfig')

else:
	app.config.from_object('mdformatter.configuration.DevelopmentConfig')

# Import views
from mdformatter.modules import error_handling
from mdformatter.render import views
