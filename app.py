# Blood Cloud - marketing site backend
# In-memory contact, newsletter and session API.
# Run with `flask --app app run` or `gunicorn app:app`.

import os
from bloodcloud import create_app

app = create_app()

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=int(os.environ.get('PORT', 5000)))
