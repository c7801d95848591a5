import importlib.util
import shutil

# CDK の合成には jsii (Node.js) が必要なため、実行環境にない場合は収集しない
if shutil.which("node") is None or importlib.util.find_spec("aws_cdk") is None:
    collect_ignore_glob = ["*.py", "constructs/*.py"]
