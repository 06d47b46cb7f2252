import os

from dotenv import load_dotenv

DEFAULT_DOCKER_URL = "http://localhost"
DEFAULT_DOCKER_UNIX = "/var/run/docker.sock"


class Config:
    def __init__(self, docker_url, docker_unix):
        # Docker daemon options
        self.docker_url = docker_url
        self.docker_unix = docker_unix

    @property
    def uses_unix_socket(self) -> bool:
        # An empty socket path means plain TCP
        return self.docker_unix != ""

    @staticmethod
    def load_env_from_file(path: str = None):
        if path:
            load_dotenv(path)
        else:
            load_dotenv()

        config = {
            'docker_url': os.getenv("DOCKER_URL", DEFAULT_DOCKER_URL),
            'docker_unix': os.getenv("DOCKER_UNIX", DEFAULT_DOCKER_UNIX),
        }

        return Config(**config)
