# File containing shared parameters for survey design construction
weights_column = "weights"
probs_column = "probs"

# Short previews printed by describe()
short_sigdigits = 3
short_head = 3

# Environment variable pointing at a TOML logging configuration
log_cfg_env = "SURVEY_DESIGN_LOG_CFG"
log_cfg_package = "survey_design"
log_cfg_file = "logging_config.toml"
log_root = "survey_design"
