"""Application Entry Point"""
import os
from dotenv import load_dotenv
from scantext import create_app

# Load environment variables from .env file
load_dotenv()

# Detect environment from ENV variable
env = os.environ.get('FLASK_ENV', 'development')
app = create_app(env)

if __name__ == '__main__':
    app.run(
        host='0.0.0.0',
        port=5001,
        debug=(env == 'development'),
    )
