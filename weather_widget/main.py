from weather_widget.factory import create_app

app = create_app()
