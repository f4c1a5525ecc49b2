from easyconnect.main import app

app(prog_name="easyconnect")
