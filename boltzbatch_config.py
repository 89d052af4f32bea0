from boltzbatch.model import SubmitConfig

def config():
    return SubmitConfig(
        input_dir="boltz_inputs",  # *.yaml to predict
        log_dir="slurm_logs",
        account="se85",
        qos="sexton01",
        reservation="sexton",
        nodelist="m3t007",
        cpus_per_task=8,  # also used for --preprocessing-threads
        mem="64G",
        time="01:00:00",
        partition="sexton",
        gres="gpu:1",
        cache_dir="/fs04/scratch2/nx54/jmobbs/docking/cache/",
        use_msa_server=False,
        override=False,
        output_format="PDB",
    )
