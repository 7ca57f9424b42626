import vedro

from contexts.fake_docker_compose import fake_docker_compose
from contexts.project_dir import config_file
from contexts.project_dir import project_dir
from helpers.compose_calls import compose_call_env
from helpers.run_cli import run_cli


class Scenario(vedro.Scenario):
    subject = 'run loadenv command with --dotenv file'

    def given_project(self):
        self.root = project_dir(dotenv='SOURCE=default\n')
        (self.root / '.env.local').write_text('SOURCE=local\n')

    def given_home_config(self):
        self.compose = fake_docker_compose()
        config_file(self.root, f'docker_compose: {self.compose.binary}\n')

    def when_user_runs_loadenv(self):
        self.result = run_cli('--dotenv', '.env.local', cwd=self.root, home=self.root)

    def then_it_should_exit_successfully(self):
        assert self.result.returncode == 0, self.result.stderr

    def and_it_should_load_given_file(self):
        assert compose_call_env(self.compose.envs_dir, 'up')['SOURCE'] == 'local'
