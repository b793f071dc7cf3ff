# student_intake/asgi.py
# uvicorn student_intake.asgi:app
from student_intake.main import create_app

app = create_app()
