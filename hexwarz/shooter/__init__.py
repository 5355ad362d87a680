"""A small arcade shooter: move, fire at falling enemies, keep score and health."""