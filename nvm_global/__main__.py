from nvm_global.cli import app

app(prog_name="nvm-global")
