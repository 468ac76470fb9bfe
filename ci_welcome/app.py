import logging

from flask import Flask, render_template

from ci_welcome import config

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to CI/CD 101 using CircleCI!"

app = Flask(__name__)


def welcome_message():
    return WELCOME_MESSAGE


@app.route('/')
def index():
    return render_template('index.html', message=welcome_message())


def main():
    logger.info("Server is running on %s:%s", config.HOST, config.PORT)
    # Listen on all network interfaces (important for Docker)
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


if __name__ == '__main__':
    main()
