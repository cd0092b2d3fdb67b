from dotenv import load_dotenv

load_dotenv()

from src.ride_ledger.ride_ledger.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=app.config["DEBUG"])
